from __future__ import annotations

from typing import Any, Dict, Optional

from ..core import compute_stats
from ..domain import CalendarMonth, PlanState, StudyPlan


def serialize_plan(plan: Optional[StudyPlan], state: PlanState) -> Dict[str, Any]:
    return {
        "state": state.value,
        "plan": plan.to_record() if plan is not None else None,
        "stats": compute_stats(plan).to_record(),
    }


def serialize_month(month: CalendarMonth) -> Dict[str, Any]:
    record = month.to_record()
    record["weeks"] = [[cell.to_record() for cell in week] for week in month.weeks()]
    return record
