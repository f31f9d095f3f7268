from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from ..domain.errors import InvalidDateError

DateLike = Union[date, datetime, str]


def _normalize_datetime(value: datetime) -> date:
    # Aware timestamps are read on the local wall clock before dropping the time.
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def parse_date(value: DateLike) -> date:
    """Return the calendar day ``value`` falls on, at local midnight.

    Accepts ``date`` and ``datetime`` objects as well as ISO 8601 strings,
    either a bare ``YYYY-MM-DD`` or a full timestamp.
    """

    if isinstance(value, datetime):
        return _normalize_datetime(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported date value: {value!r}")

    raw = value.strip()
    if not raw:
        raise InvalidDateError("Date value is empty.")
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        return _normalize_datetime(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError as exc:
        raise InvalidDateError(f"Invalid ISO date: {value!r}") from exc


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from ``start`` to ``end``; negative if ``end`` is earlier."""

    return (parse_date(end) - parse_date(start)).days


def shift_days(day: date, offset: int) -> date:
    return day + timedelta(days=offset)
