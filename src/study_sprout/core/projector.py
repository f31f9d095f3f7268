from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List

from ..domain import CalendarCell, CalendarMonth, DatedTask, EmptyPlanError, StudyPlan, WeekStart


def task_dates(plan: StudyPlan) -> List[DatedTask]:
    """Date every entry counting back from the exam; the last one lands the day before."""

    length = len(plan.plan)
    return [
        DatedTask(date=plan.exam_date - timedelta(days=length - index), original_index=index, task=task)
        for index, task in enumerate(plan.plan)
    ]


def _month_grid(year: int, month: int, dated: List[DatedTask], week_start: WeekStart) -> CalendarMonth:
    first_weekday, days_in_month = calendar.monthrange(year, month)
    start_day_of_week = (first_weekday - week_start.weekday) % 7

    in_month = {item.date.day: item for item in dated if item.date.year == year and item.date.month == month}
    cells = [CalendarCell() for _ in range(start_day_of_week)]
    for day_of_month in range(1, days_in_month + 1):
        match = in_month.get(day_of_month)
        cells.append(
            CalendarCell(
                date=date(year, month, day_of_month),
                task=match.task if match else None,
                original_index=match.original_index if match else None,
            )
        )

    return CalendarMonth(
        month_name=calendar.month_name[month],
        year=year,
        month=month,
        start_day_of_week=start_day_of_week,
        days_in_month=days_in_month,
        cells=cells,
        dated_tasks=dated,
        unmatched_indices=[
            item.original_index for item in dated if (item.date.year, item.date.month) != (year, month)
        ],
    )


def project(plan: StudyPlan, *, week_start: WeekStart = WeekStart.SUNDAY) -> CalendarMonth:
    """Lay the plan onto the month grid of its first study day.

    Entries falling in a later month are not gridded; their indices are
    reported in ``unmatched_indices``. Use :func:`project_months` to grid
    every month the plan touches.
    """

    if not plan.plan:
        raise EmptyPlanError("Cannot project an empty plan onto a calendar.")
    dated = task_dates(plan)
    reference = dated[0].date
    return _month_grid(reference.year, reference.month, dated, week_start)


def project_months(plan: StudyPlan, *, week_start: WeekStart = WeekStart.SUNDAY) -> List[CalendarMonth]:
    if not plan.plan:
        raise EmptyPlanError("Cannot project an empty plan onto a calendar.")
    dated = task_dates(plan)
    months: List[tuple[int, int]] = []
    for item in dated:
        key = (item.date.year, item.date.month)
        if key not in months:
            months.append(key)
    return [_month_grid(year, month, dated, week_start) for year, month in months]
