# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from taskdash.schema import Task


class FakeAdapter:
    """
    In-memory PersistenceAdapter.

    - Records every saved snapshot for assertions
    - Can be told to fail on save or load
    """

    def __init__(self, records: Any = None, fail_save: bool = False, fail_load: bool = False) -> None:
        self.records = [] if records is None else records
        self.fail_save = fail_save
        self.fail_load = fail_load
        self.saves: list[tuple[Task, ...]] = []
        self.load_calls = 0

    def load(self) -> Any:
        self.load_calls += 1
        if self.fail_load:
            raise OSError("storage unavailable")
        return self.records

    def save(self, snapshot: Sequence[Task]) -> None:
        if self.fail_save:
            raise OSError("storage full")
        self.saves.append(tuple(snapshot))


def make_draft(title: str = "Task", due: str = "2024-01-10", priority: str = "Medium", **extra: Any) -> dict:
    return {"title": title, "description": "", "priority": priority, "dueDate": due, **extra}
