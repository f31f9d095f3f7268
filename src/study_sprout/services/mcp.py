from __future__ import annotations

import logging

from fastmcp import FastMCP

from ..api import get_api_functions
from ..logging import configure_logging

INSTRUCTIONS = (
    "Study Sprout MCP server exposes deterministic exam study plan tools. "
    "Generate a plan for an upcoming exam, tick off study days and read progress or the calendar grid."
)

logger = logging.getLogger(__name__)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="study-sprout", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    configure_logging()
    build_mcp_server().run("streamable-http", host=host, port=port)
