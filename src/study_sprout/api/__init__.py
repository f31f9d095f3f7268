"""Deterministic study plan tools shared by the HTTP server, MCP server and CLI."""

from __future__ import annotations

from .registry import ApiFunction, call_api, call_api_async, get_api_functions, register_api
from .state import api_state

# Import tool modules so decorators run at module import time.
from . import meta, planning  # noqa: F401

__all__ = ["ApiFunction", "api_state", "call_api", "call_api_async", "get_api_functions", "register_api"]
