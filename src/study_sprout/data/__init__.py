"""Data access layer."""

from __future__ import annotations

from .store import PlanStore, PlanStoreError

__all__ = ["PlanStore", "PlanStoreError"]
