from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..domain import IndexOutOfRangeError, PlanStats, StudyPlan


def toggle_task(plan: StudyPlan, index: int) -> StudyPlan:
    """Return a copy of ``plan`` with the completion of day ``index`` flipped."""

    if not 0 <= index < len(plan.plan):
        raise IndexOutOfRangeError(f"Day index {index} is outside 0..{len(plan.plan) - 1}.")
    tasks = list(plan.plan)
    tasks[index] = replace(tasks[index], completed=not tasks[index].completed)
    return replace(plan, plan=tasks)


def compute_stats(plan: Optional[StudyPlan]) -> PlanStats:
    if plan is None or not plan.plan:
        return PlanStats(completed=0, total=0, percent=0)
    total = len(plan.plan)
    completed = sum(1 for task in plan.plan if task.completed)
    # Integer round-half-up, so 1 of 8 days reads 13% rather than 12%.
    percent = (200 * completed + total) // (2 * total)
    return PlanStats(completed=completed, total=total, percent=percent)
