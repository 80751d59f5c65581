"""
TASKDASH - Task Schema Definition
=================================
Record types for the personal task tracker: the Task entity, the Draft
used to create one, view parameters and aggregate stats.

Enum values double as display strings and as the persisted form.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


ALL = "All"


class TaskStatus(str, Enum):
    """Task workflow states"""
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @classmethod
    def values(cls) -> list:
        return [s.value for s in cls]


class TaskPriority(str, Enum):
    """Task priority levels"""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class SortDirection(str, Enum):
    """Due date ordering for derived views"""
    ASC = "asc"
    DESC = "desc"


def parse_due_date(value: Any) -> Optional[date]:
    """Best-effort calendar date parsing; None when the value is unusable"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            return date.fromisoformat(raw[:10])
        except ValueError:
            return None
    return None


class Task(BaseModel):
    """A tracked task. Immutable: status changes produce a replacement record."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    status: TaskStatus = TaskStatus.TODO

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("due_date", mode="before")
    @classmethod
    def _lenient_due_date(cls, value: Any) -> Optional[date]:
        # Stored data is trusted; a bad date degrades to None instead of failing.
        return parse_due_date(value)


class TaskDraft(BaseModel):
    """User-supplied input to task creation"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date = Field(alias="dueDate")

    @field_validator("title")
    @classmethod
    def _title_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("due_date", mode="before")
    @classmethod
    def _datetime_to_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        return value


class ViewParams(BaseModel):
    """Status filter, priority filter and sort direction for a derived view"""
    model_config = ConfigDict(frozen=True)

    status_filter: Union[Literal["All"], TaskStatus] = ALL
    priority_filter: Union[Literal["All"], TaskPriority] = ALL
    sort_direction: SortDirection = SortDirection.ASC


class TaskStats(BaseModel):
    """Aggregate counts over the full collection"""
    model_config = ConfigDict(frozen=True)

    total: int = 0
    completed: int = 0
    pending: int = 0

    @property
    def progress_pct(self) -> int:
        if not self.total:
            return 0
        return int((self.completed / self.total) * 100)


Snapshot = Tuple[Task, ...]
