"""
TASKDASH - Task Store
=====================
Single source of truth for the task collection.

Every mutation builds a new immutable snapshot (a tuple of frozen Task
records in insertion order), hands it to the persistence adapter and then
to subscribers. Readers holding an older snapshot are never affected.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidStatusError, NotFoundError, ValidationError
from .persistence import PersistenceAdapter
from .schema import Snapshot, Task, TaskDraft, TaskStatus

logger = logging.getLogger("taskdash.store")

Subscriber = Callable[[Snapshot], None]


@dataclass(frozen=True)
class Commit:
    """Outcome of a mutation: the new snapshot and any (non-fatal) save failure"""
    snapshot: Snapshot
    save_error: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.save_error is None


class TaskStore:
    """
    In-memory task store

    Ids are integers allocated from a counter that only moves forward, so an
    id is never handed out twice within one store, even after deletion or
    hydration.
    """

    def __init__(self, adapter: Optional[PersistenceAdapter] = None):
        self.adapter = adapter
        self._snapshot: Snapshot = ()
        self._next_id = 1
        self._subscribers: List[Subscriber] = []

    # ========================================
    # READ ACCESS
    # ========================================

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._snapshot)

    def get(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._snapshot:
            if task.id == task_id:
                return task
        return None

    # ========================================
    # SUBSCRIPTIONS
    # ========================================

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every new snapshot; returns an unsubscribe function"""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self._snapshot)
            except Exception as e:
                logger.warning(f"Subscriber {callback!r} failed: {e}")

    # ========================================
    # STARTUP
    # ========================================

    def load(self) -> Snapshot:
        """Hydrate from the persistence adapter (called once at startup)"""
        if self.adapter is None:
            return self.hydrate([])
        try:
            records = self.adapter.load()
        except Exception as e:
            logger.warning(f"Could not load tasks, starting empty: {e}")
            records = []
        return self.hydrate(records)

    def hydrate(self, tasks: Optional[Iterable[Union[Task, Mapping[str, Any]]]]) -> Snapshot:
        """
        Replace the whole snapshot with externally supplied data.

        Only the record shape is checked. Records that cannot be read as a
        Task are dropped; anything that is not a sequence of records gives an
        empty snapshot.
        """
        if tasks is None or isinstance(tasks, (str, bytes, Mapping)):
            tasks = []

        hydrated = []
        seen_ids = set()
        try:
            for record in tasks:
                try:
                    task = record if isinstance(record, Task) else Task.model_validate(record)
                except PydanticValidationError as e:
                    logger.warning(f"Dropping unreadable task record: {e.error_count()} error(s)")
                    continue
                if task.id in seen_ids:
                    logger.warning(f"Dropping duplicate task id {task.id}")
                    continue
                seen_ids.add(task.id)
                hydrated.append(task)
        except TypeError as e:
            logger.warning(f"Stored tasks are not a sequence, starting empty: {e}")
            hydrated = []

        self._snapshot = tuple(hydrated)
        if hydrated:
            self._next_id = max(self._next_id, max(t.id for t in hydrated) + 1)

        logger.debug(f"Hydrated {len(self._snapshot)} task(s), next id {self._next_id}")
        self._notify()
        return self._snapshot

    # ========================================
    # MUTATIONS
    # ========================================

    def create(self, draft: Union[TaskDraft, Mapping[str, Any]]) -> Commit:
        """Append a new task (status To Do) built from a draft"""
        # Drafts are re-checked too; model_construct() skips validation
        if isinstance(draft, TaskDraft):
            draft = draft.model_dump()
        try:
            draft = TaskDraft.model_validate(draft)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'draft'}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(f"Invalid task: {problems}", e.errors()) from e

        task = Task(
            id=self._allocate_id(),
            title=draft.title,
            description=draft.description,
            priority=draft.priority,
            due_date=draft.due_date,
            status=TaskStatus.TODO,
        )
        logger.info(f"➕ Created task: {task.title} ({task.id})")
        return self._commit(self._snapshot + (task,))

    def delete(self, task_id: int) -> Commit:
        """Remove a task; unknown ids leave the snapshot untouched"""
        remaining = tuple(t for t in self._snapshot if t.id != task_id)
        if len(remaining) == len(self._snapshot):
            logger.debug(f"Delete ignored, no task {task_id}")
            return Commit(self._snapshot)

        logger.info(f"🗑️ Deleted task {task_id}")
        return self._commit(remaining)

    def set_status(self, task_id: int, new_status: Union[TaskStatus, str]) -> Commit:
        """Replace the status of one task"""
        try:
            status = TaskStatus(new_status)
        except ValueError:
            raise InvalidStatusError(new_status, TaskStatus.values()) from None

        current = self.get(task_id)
        if current is None:
            raise NotFoundError(task_id)

        updated = current.model_copy(update={"status": status})
        snapshot = tuple(updated if t.id == task_id else t for t in self._snapshot)

        logger.info(f"🔄 Task {task_id}: {current.status.value} -> {status.value}")
        return self._commit(snapshot)

    # ========================================
    # HELPER METHODS
    # ========================================

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _commit(self, snapshot: Snapshot) -> Commit:
        self._snapshot = snapshot

        save_error = None
        if self.adapter is not None:
            try:
                self.adapter.save(snapshot)
            except Exception as e:
                save_error = str(e) or e.__class__.__name__
                logger.warning(f"Saving tasks failed, keeping in-memory state: {save_error}")

        self._notify()
        return Commit(snapshot, save_error)
