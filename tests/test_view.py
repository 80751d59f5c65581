# tests/test_view.py

from __future__ import annotations

import itertools
from datetime import date

import pytest

from taskdash.schema import ALL, SortDirection, Task, TaskPriority, TaskStatus, ViewParams
from taskdash.view import derive_view


def _task(task_id: int, due: date | None, priority: str = "Medium", status: str = "To Do") -> Task:
    return Task(id=task_id, title=f"t{task_id}", priority=priority, due_date=due, status=status)


@pytest.fixture()
def snapshot() -> tuple[Task, ...]:
    return (
        _task(1, date(2024, 1, 10), "High", "To Do"),
        _task(2, date(2024, 1, 5), "Low", "Completed"),
        _task(3, date(2024, 1, 10), "Medium", "In Progress"),
        _task(4, date(2024, 2, 1), "High", "Completed"),
        _task(5, date(2024, 1, 10), "High", "To Do"),
        _task(6, None, "Low", "In Progress"),
    )


def test_default_params_sort_ascending() -> None:
    a = _task(1, date(2024, 1, 10), "High", "To Do")
    b = _task(2, date(2024, 1, 5), "Low", "Completed")

    view = derive_view((a, b), status_filter="All", priority_filter="All", sort_direction="asc")

    assert view == (b, a)


def test_empty_snapshot_gives_empty_view() -> None:
    for status, priority, direction in itertools.product(
        [ALL] + TaskStatus.values(), [ALL] + [p.value for p in TaskPriority], ["asc", "desc"]
    ):
        assert derive_view((), status_filter=status, priority_filter=priority, sort_direction=direction) == ()


@pytest.mark.parametrize("status", [ALL] + TaskStatus.values())
@pytest.mark.parametrize("priority", [ALL] + [p.value for p in TaskPriority])
def test_filter_correctness(snapshot: tuple[Task, ...], status: str, priority: str) -> None:
    view = derive_view(snapshot, status_filter=status, priority_filter=priority)

    def matches(t: Task) -> bool:
        return (status == ALL or t.status == status) and (priority == ALL or t.priority == priority)

    assert all(matches(t) for t in view)
    expected = [t.id for t in snapshot if matches(t)]
    assert sorted(t.id for t in view) == sorted(expected)
    assert len(view) == len(set(t.id for t in view))


@pytest.mark.parametrize("direction", ["asc", "desc"])
def test_equal_dates_keep_snapshot_order(snapshot: tuple[Task, ...], direction: str) -> None:
    view = derive_view(snapshot, sort_direction=direction)
    same_day = [t.id for t in view if t.due_date == date(2024, 1, 10)]
    assert same_day == [1, 3, 5]


def test_descending_order(snapshot: tuple[Task, ...]) -> None:
    view = derive_view(snapshot, sort_direction=SortDirection.DESC)
    assert [t.id for t in view] == [4, 1, 3, 5, 2, 6]


def test_missing_due_date_sorts_first(snapshot: tuple[Task, ...]) -> None:
    view = derive_view(snapshot)
    assert view[0].id == 6
    assert [t.id for t in view] == [6, 2, 1, 3, 5, 4]


def test_view_does_not_touch_input(snapshot: tuple[Task, ...]) -> None:
    before = list(snapshot)
    derive_view(snapshot, sort_direction="desc")
    assert list(snapshot) == before


def test_deterministic_and_params_object(snapshot: tuple[Task, ...]) -> None:
    params = ViewParams(status_filter="Completed", sort_direction="desc")
    first = derive_view(snapshot, params)
    second = derive_view(list(snapshot), params)
    assert first == second
    assert [t.id for t in first] == [4, 2]


def test_overrides_apply_on_top_of_params(snapshot: tuple[Task, ...]) -> None:
    params = ViewParams(status_filter="Completed")
    view = derive_view(snapshot, params, priority_filter="High")
    assert [t.id for t in view] == [4]


def test_invalid_filter_value_rejected(snapshot: tuple[Task, ...]) -> None:
    with pytest.raises(ValueError):
        derive_view(snapshot, status_filter="Done")
