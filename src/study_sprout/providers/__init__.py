"""Plan content providers and the request/response boundary they share."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import AppSettings, get_settings
from .base import PlanContentProvider, PlanEntry, PlanRequest, PlanResponse, ProviderPayload
from .openai_provider import OpenAIPlanProvider
from .outline import OutlinePlanProvider

logger = logging.getLogger(__name__)


def build_provider(settings: Optional[AppSettings] = None) -> PlanContentProvider:
    settings = settings or get_settings()
    if settings.llm.is_configured:
        return OpenAIPlanProvider(settings.llm)
    missing = ", ".join(settings.llm.missing_env_vars)
    logger.warning("OpenAI is not configured (missing: %s); using the offline outline planner.", missing)
    return OutlinePlanProvider()


__all__ = [
    "OpenAIPlanProvider",
    "OutlinePlanProvider",
    "PlanContentProvider",
    "PlanEntry",
    "PlanRequest",
    "PlanResponse",
    "ProviderPayload",
    "build_provider",
]
