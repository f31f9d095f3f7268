from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from ..domain import PlannerError, StudyPlan

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class PlanStoreError(RuntimeError):
    """Raised when the persisted plan blob cannot be read back."""


class PlanStore:
    """Flat JSON blob holding the current plan, overwritten on every change."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read_raw(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = orjson.loads(self._path.read_bytes() or b"{}")
        except orjson.JSONDecodeError as exc:
            raise PlanStoreError(f"Plan file {self._path} is not valid JSON.") from exc
        if not isinstance(data, dict):
            raise PlanStoreError(f"Plan file {self._path} does not hold an object.")
        return data

    def _write_raw(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2) + b"\n")

    def load(self) -> Optional[StudyPlan]:
        record = self._read_raw().get("plan")
        if not record:
            return None
        try:
            return StudyPlan.from_record(record)
        except (AttributeError, KeyError, TypeError, PlannerError) as exc:
            raise PlanStoreError(f"Plan file {self._path} holds an unreadable plan.") from exc

    def save(self, plan: StudyPlan) -> None:
        self._write_raw({"plan": plan.to_record(), "metadata": {"schema_version": SCHEMA_VERSION}})
        logger.debug("Saved %d-day plan to %s", len(plan.plan), self._path)

    def clear(self) -> None:
        self._write_raw({"plan": None, "metadata": {"schema_version": SCHEMA_VERSION}})
        logger.debug("Cleared plan at %s", self._path)
