"""Tests for study_sprout.core.dates."""

from datetime import date, datetime

import pytest

from study_sprout.core import days_between, parse_date
from study_sprout.domain import InvalidDateError


def test_days_between_counts_whole_days() -> None:
    assert days_between(date(2024, 1, 1), date(2024, 1, 5)) == 4


def test_days_between_ignores_time_of_day() -> None:
    late = datetime(2024, 1, 1, 23, 0)
    midnight = datetime(2024, 1, 1, 0, 0)
    assert days_between(late, "2024-01-05") == days_between(midnight, "2024-01-05") == 4
    assert days_between(late, datetime(2024, 1, 2, 0, 30)) == 1


def test_days_between_is_negative_when_end_is_earlier() -> None:
    assert days_between("2024-01-05", "2024-01-01") == -4
    assert days_between("2024-01-05", "2024-01-05") == 0


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        ("2024-03-09", "2024-03-11", 2),
        ("2024-10-26", "2024-10-28", 2),
        ("2024-02-28", "2024-03-01", 2),
        ("2023-12-31", "2024-01-01", 1),
    ],
)
def test_days_between_across_dst_leap_and_year_boundaries(start: str, end: str, expected: int) -> None:
    assert days_between(start, end) == expected


def test_parse_date_accepts_full_timestamps() -> None:
    assert parse_date("2024-01-05T18:45:00") == date(2024, 1, 5)
    assert parse_date(" 2024-01-05 ") == date(2024, 1, 5)


@pytest.mark.parametrize("value", ["2024-02-30", "not a date", "", "2024/01/05", 20240105, None])
def test_invalid_dates_raise(value: object) -> None:
    with pytest.raises(InvalidDateError):
        days_between("2024-01-01", value)  # type: ignore[arg-type]


def test_invalid_date_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_date("2024-13-01")
