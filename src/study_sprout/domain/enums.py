from __future__ import annotations

from enum import Enum


class PlanState(str, Enum):
    NO_PLAN = "no_plan"
    GENERATING = "generating"
    ACTIVE = "active"


class WeekStart(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"

    @property
    def weekday(self) -> int:
        """Return the ``datetime.date.weekday()`` value of the first column."""

        return 6 if self is WeekStart.SUNDAY else 0
