"""
TASKDASH - Smart Task Dashboard
===============================

Personal task tracker: an immutable-snapshot task store, a pure view
engine (filter + stable due-date sort) and a stats aggregator.

Usage:
    from taskdash import TaskStore, JsonFileStorage, JsonTaskRepository
    from taskdash import derive_view, compute_stats

    store = TaskStore(JsonTaskRepository(JsonFileStorage("tasks.json")))
    store.load()

    store.create({"title": "Pay rent", "dueDate": "2024-02-01", "priority": "High"})
    store.set_status(1, "In Progress")

    tasks = derive_view(store.snapshot, status_filter="All", sort_direction="desc")
    stats = compute_stats(store.snapshot)
"""

from .schema import (
    ALL,
    Snapshot,
    SortDirection,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStats,
    TaskStatus,
    ViewParams,
)
from .errors import (
    InvalidStatusError,
    NotFoundError,
    PersistenceError,
    TaskError,
    ValidationError,
)
from .persistence import (
    JsonFileStorage,
    JsonTaskRepository,
    PersistenceAdapter,
    ThemePreference,
)
from .store import Commit, TaskStore
from .view import derive_view
from .stats import compute_stats, status_breakdown

__version__ = "1.0.0"
__all__ = [
    "ALL",
    "Snapshot",
    "SortDirection",
    "Task",
    "TaskDraft",
    "TaskPriority",
    "TaskStats",
    "TaskStatus",
    "ViewParams",
    "TaskError",
    "ValidationError",
    "NotFoundError",
    "InvalidStatusError",
    "PersistenceError",
    "PersistenceAdapter",
    "JsonFileStorage",
    "JsonTaskRepository",
    "ThemePreference",
    "Commit",
    "TaskStore",
    "derive_view",
    "compute_stats",
    "status_breakdown",
]
