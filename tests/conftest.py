# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskdash.persistence import JsonFileStorage, JsonTaskRepository
from taskdash.store import TaskStore

from .fakes import FakeAdapter


@pytest.fixture()
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture()
def store(adapter: FakeAdapter) -> TaskStore:
    return TaskStore(adapter)


@pytest.fixture()
def storage(tmp_path: Path) -> JsonFileStorage:
    return JsonFileStorage(tmp_path / "storage.json")


@pytest.fixture()
def repository(storage: JsonFileStorage) -> JsonTaskRepository:
    return JsonTaskRepository(storage)
