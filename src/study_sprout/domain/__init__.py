"""Domain models for exam study plans."""

from __future__ import annotations

from .enums import PlanState, WeekStart
from .errors import (
    EmptyPlanError,
    HorizonExceededError,
    IndexOutOfRangeError,
    InvalidDateError,
    InvalidRequestError,
    NoActivePlanError,
    PastOrPresentExamError,
    PlannerError,
    ProviderError,
)
from .models import CalendarCell, CalendarMonth, DatedTask, PlanStats, StudyPlan, StudyTask

__all__ = [
    "CalendarCell",
    "CalendarMonth",
    "DatedTask",
    "EmptyPlanError",
    "HorizonExceededError",
    "IndexOutOfRangeError",
    "InvalidDateError",
    "InvalidRequestError",
    "NoActivePlanError",
    "PastOrPresentExamError",
    "PlanState",
    "PlanStats",
    "PlannerError",
    "ProviderError",
    "StudyPlan",
    "StudyTask",
    "WeekStart",
]
