"""
TASKDASH - View Engine
======================
Pure derivation of the displayed task list from a snapshot.
"""

from datetime import date
from functools import lru_cache
from typing import Any, Iterable, Optional, Tuple

from .schema import ALL, SortDirection, Task, ViewParams


def _due_key(task: Task) -> date:
    # Missing dates sort as the earliest possible date
    return task.due_date or date.min


@lru_cache(maxsize=64)
def _derive(snapshot: Tuple[Task, ...], params: ViewParams) -> Tuple[Task, ...]:
    tasks = [
        t for t in snapshot
        if (params.status_filter == ALL or t.status == params.status_filter)
        and (params.priority_filter == ALL or t.priority == params.priority_filter)
    ]
    # sorted() is stable for reverse=True as well, so equal dates keep their order
    return tuple(sorted(
        tasks,
        key=_due_key,
        reverse=params.sort_direction == SortDirection.DESC,
    ))


def derive_view(
    snapshot: Iterable[Task],
    params: Optional[ViewParams] = None,
    **overrides: Any,
) -> Tuple[Task, ...]:
    """
    Filter by status and priority, then sort by due date.

    Params can be given as a ViewParams, as keyword overrides
    (status_filter="Completed", sort_direction="desc"), or both.
    """
    if params is None:
        params = ViewParams(**overrides)
    elif overrides:
        params = ViewParams(**{**params.model_dump(), **overrides})
    return _derive(tuple(snapshot), params)
