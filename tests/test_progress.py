"""Tests for study_sprout.core.progress."""

import pytest

from conftest import make_plan
from study_sprout.core import compute_stats, toggle_task
from study_sprout.domain import IndexOutOfRangeError, StudyPlan


def test_toggle_flips_only_the_addressed_day() -> None:
    plan = make_plan(5, completed=[3])
    toggled = toggle_task(plan, 1)

    assert [task.completed for task in toggled.plan] == [False, True, False, True, False]
    assert [task.completed for task in plan.plan] == [False, False, False, True, False]


def test_toggle_twice_restores_the_original_plan() -> None:
    plan = make_plan(5, completed=[0, 4])
    assert toggle_task(toggle_task(plan, 2), 2) == plan
    assert toggle_task(toggle_task(plan, 4), 4) == plan


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_toggle_outside_the_plan_raises(index: int) -> None:
    with pytest.raises(IndexOutOfRangeError):
        toggle_task(make_plan(5), index)


def test_index_error_is_catchable_as_builtin() -> None:
    with pytest.raises(IndexError):
        toggle_task(make_plan(0), 0)


@pytest.mark.parametrize("length", [1, 60])
def test_stats_bounds(length: int) -> None:
    assert compute_stats(make_plan(length)).percent == 0
    finished = compute_stats(make_plan(length, completed=list(range(length))))
    assert (finished.completed, finished.total, finished.percent) == (length, length, 100)


@pytest.mark.parametrize(
    ("length", "completed", "percent"),
    [(3, [0], 33), (3, [0, 1], 67), (8, [0], 13), (60, [0, 1, 2], 5)],
)
def test_stats_round_to_whole_percent(length: int, completed: list, percent: int) -> None:
    assert compute_stats(make_plan(length, completed=completed)).percent == percent


def test_stats_of_empty_or_missing_plan_are_zero() -> None:
    empty = StudyPlan(exam_name="Nothing", exam_date=make_plan(1).exam_date)
    for plan in (empty, None):
        stats = compute_stats(plan)
        assert (stats.completed, stats.total, stats.percent) == (0, 0, 0)
