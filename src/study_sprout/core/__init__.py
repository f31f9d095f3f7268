"""Study plan engine: date arithmetic, plan building, progress and calendar projection."""

from __future__ import annotations

from .builder import MAX_PLAN_DAYS, build_plan, count_study_days, prepare_request, request_plan
from .dates import days_between, parse_date
from .progress import compute_stats, toggle_task
from .projector import project, project_months, task_dates

__all__ = [
    "MAX_PLAN_DAYS",
    "build_plan",
    "compute_stats",
    "count_study_days",
    "days_between",
    "parse_date",
    "prepare_request",
    "project",
    "project_months",
    "request_plan",
    "task_dates",
    "toggle_task",
]
