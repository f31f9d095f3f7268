from __future__ import annotations

from typing import Any, Dict, Optional

from .registry import register_api
from .serializers import serialize_month, serialize_plan
from .state import api_state


@register_api(
    "generate_study_plan",
    description=(
        "Generate a day-by-day study plan for an exam 1 to 60 days away, replacing the current plan. "
        "Dates are ISO formatted (YYYY-MM-DD); today defaults to the local date."
    ),
    category="planning",
    tags=("planning", "write"),
)
async def generate_study_plan(
    exam_name: str,
    exam_date: str,
    syllabus: str,
    today: Optional[str] = None,
) -> Dict[str, Any]:
    planner = api_state.planner
    plan = await planner.generate(exam_name, exam_date, syllabus, today=today)
    result = serialize_plan(planner.plan, planner.state)
    result["superseded"] = plan is None
    return result


@register_api(
    "get_study_plan",
    description="Return the current study plan, its lifecycle state and progress.",
    category="planning",
    tags=("planning", "read"),
)
def get_study_plan() -> Dict[str, Any]:
    planner = api_state.planner
    return serialize_plan(planner.plan, planner.state)


@register_api(
    "toggle_study_day",
    description="Flip the completed flag of one study day, addressed by its zero-based index.",
    category="progress",
    tags=("progress", "write"),
)
def toggle_study_day(index: int) -> Dict[str, Any]:
    planner = api_state.planner
    plan = planner.toggle(index)
    return {
        "index": index,
        "completed": plan.plan[index].completed,
        "stats": planner.stats().to_record(),
    }


@register_api(
    "study_plan_progress",
    description="Return completed days, total days and percent complete for the current plan.",
    category="progress",
    tags=("progress", "read"),
)
def study_plan_progress() -> Dict[str, Any]:
    return api_state.planner.stats().to_record()


@register_api(
    "study_plan_calendar",
    description=(
        "Project the current plan onto a month grid. By default only the month of the first study day is gridded "
        "and tasks outside it are reported as unmatched; set all_months to grid every month."
    ),
    category="calendar",
    tags=("calendar", "read"),
)
def study_plan_calendar(all_months: bool = False) -> Dict[str, Any]:
    planner = api_state.planner
    months = planner.calendar_months() if all_months else [planner.calendar()]
    return {"months": [serialize_month(month) for month in months]}


@register_api(
    "reset_study_plan",
    description="Discard the current study plan and any generation still in flight.",
    category="planning",
    tags=("planning", "write"),
)
def reset_study_plan() -> Dict[str, Any]:
    planner = api_state.planner
    planner.reset()
    return {"state": planner.state.value}
