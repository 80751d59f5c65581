"""
TASKDASH - Persistence
======================
File-based key-value storage for the task collection and the theme
preference. The whole document is rewritten on every save.
"""

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Sequence, Union

from .errors import PersistenceError
from .schema import Task

logger = logging.getLogger("taskdash.persistence")

TASKS_KEY = "smartTasks"
THEME_KEY = "theme"


class PersistenceAdapter(Protocol):
    """What the task store needs from durable storage"""

    def load(self) -> Sequence[Union[Task, Mapping[str, Any]]]:
        ...

    def save(self, snapshot: Sequence[Task]) -> None:
        ...


class JsonFileStorage:
    """A JSON object on disk used as a small key-value store"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: top level is not an object")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        # Write beside the target and swap, so a failed write keeps the old file
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise PersistenceError(f"Could not write {self.path}: {e}") from e


class JsonTaskRepository:
    """PersistenceAdapter keeping the snapshot as a list of task records"""

    def __init__(self, storage: JsonFileStorage, key: str = TASKS_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> List[Dict[str, Any]]:
        data = self.storage.get(self.key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"Stored '{self.key}' is not a list, ignoring it")
            return []
        return [record for record in data if isinstance(record, dict)]

    def save(self, snapshot: Sequence[Task]) -> None:
        records = [task.model_dump(mode="json", by_alias=True) for task in snapshot]
        self.storage.set(self.key, records)
        logger.debug(f"💾 Saved {len(records)} task(s) to {self.storage.path}")


class ThemePreference:
    """Dark/light preference, stored independently of the tasks"""

    DARK = "dark"
    LIGHT = "light"

    def __init__(self, storage: JsonFileStorage, key: str = THEME_KEY):
        self.storage = storage
        self.key = key

    def get(self) -> bool:
        return self.storage.get(self.key) == self.DARK

    def set(self, dark: bool) -> None:
        self.storage.set(self.key, self.DARK if dark else self.LIGHT)

    def toggle(self) -> bool:
        dark = not self.get()
        self.set(dark)
        return dark
