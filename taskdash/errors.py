"""
TASKDASH - Error Taxonomy
=========================
Everything the task store raises derives from TaskError so callers
(the CLI, tests, embedding apps) can catch one type.
"""

from typing import Any, List, Optional


class TaskError(Exception):
    """Base class for task store failures"""


class ValidationError(TaskError):
    """Malformed create input (empty title, missing or unparseable due date)"""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(TaskError, LookupError):
    """A mutation targeted an id that is not in the snapshot"""

    def __init__(self, task_id: Any):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class InvalidStatusError(TaskError, ValueError):
    """Status value outside the workflow enum"""

    def __init__(self, value: Any, allowed: Optional[List[str]] = None):
        allowed_str = f" (expected one of: {', '.join(allowed)})" if allowed else ""
        super().__init__(f"Invalid status: {value!r}{allowed_str}")
        self.value = value


class PersistenceError(TaskError):
    """Durable storage could not be written"""
