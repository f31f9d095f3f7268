from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .errors import InvalidDateError


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise InvalidDateError(f"Invalid ISO date: {value!r}") from exc
    raise InvalidDateError(f"Unsupported date value: {value!r}")


@dataclass(slots=True)
class StudyTask:
    day: str
    topic: str
    focus: str
    strategy: str
    completed: bool = False

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "StudyTask":
        return cls(
            day=str(record.get("day", "")),
            topic=str(record.get("topic", "")),
            focus=str(record.get("focus", "")),
            strategy=str(record.get("strategy", "")),
            completed=bool(record.get("completed", False)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "topic": self.topic,
            "focus": self.focus,
            "strategy": self.strategy,
            "completed": self.completed,
        }


@dataclass(slots=True)
class StudyPlan:
    """An exam and its ordered study days.

    Index 0 is the first study day and the last index is the day right before
    ``exam_date``; the calendar date of every entry is derived from its
    position, so the order of ``plan`` is significant.
    """

    exam_name: str
    exam_date: date
    plan: List[StudyTask] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "StudyPlan":
        return cls(
            exam_name=str(record["examName"]),
            exam_date=_parse_date(record["examDate"]),
            plan=[StudyTask.from_record(item) for item in record.get("plan") or []],
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "examName": self.exam_name,
            "examDate": self.exam_date.isoformat(),
            "plan": [task.to_record() for task in self.plan],
        }


@dataclass(frozen=True, slots=True)
class PlanStats:
    completed: int
    total: int
    percent: int

    def to_record(self) -> Dict[str, int]:
        return {"completed": self.completed, "total": self.total, "percent": self.percent}


@dataclass(frozen=True, slots=True)
class DatedTask:
    date: date
    original_index: int
    task: StudyTask

    def to_record(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "originalIndex": self.original_index,
            "task": self.task.to_record(),
        }


@dataclass(frozen=True, slots=True)
class CalendarCell:
    """One square of a month grid; leading blanks have no ``date``."""

    date: Optional[date] = None
    task: Optional[StudyTask] = None
    original_index: Optional[int] = None

    @property
    def is_blank(self) -> bool:
        return self.date is None

    @property
    def day_of_month(self) -> Optional[int]:
        return self.date.day if self.date else None

    def to_record(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat() if self.date else None,
            "dayOfMonth": self.day_of_month,
            "originalIndex": self.original_index,
            "task": self.task.to_record() if self.task else None,
        }


@dataclass(frozen=True, slots=True)
class CalendarMonth:
    month_name: str
    year: int
    month: int
    start_day_of_week: int
    days_in_month: int
    cells: List[CalendarCell]
    dated_tasks: List[DatedTask]
    unmatched_indices: List[int] = field(default_factory=list)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched_indices)

    def weeks(self) -> List[List[CalendarCell]]:
        return [self.cells[start : start + 7] for start in range(0, len(self.cells), 7)]

    def to_record(self) -> Dict[str, Any]:
        return {
            "monthName": self.month_name,
            "year": self.year,
            "month": self.month,
            "startDayOfWeek": self.start_day_of_week,
            "daysInMonth": self.days_in_month,
            "cells": [cell.to_record() for cell in self.cells],
            "tasksWithDates": [item.to_record() for item in self.dated_tasks],
            "unmatchedIndices": list(self.unmatched_indices),
        }
