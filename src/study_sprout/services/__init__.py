"""Application services orchestrating storage, providers and the plan engine."""

from __future__ import annotations

from .context import ServiceContext
from .planner import PlannerService

__all__ = ["PlannerService", "ServiceContext"]
