# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from terminal_todo.core.state import AppState
from terminal_todo.persistence import MemoryPersistence
from terminal_todo.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Terminal TODO",
        log_level="DEBUG",
        storage_backend="memory",
        storage_key="terminal_todo_items_v1",
        data_dir=tmp_path,
        state_db_path=tmp_path / "todo.sqlite3",
        state_dir=tmp_path / "state",
        color=False,
        history_size=3,
    )


@pytest.fixture()
def persistence() -> MemoryPersistence:
    return MemoryPersistence()


@pytest.fixture()
def store(persistence: MemoryPersistence) -> TaskStore:
    return TaskStore(persistence)


@pytest.fixture()
def state(settings: SimpleNamespace, persistence: MemoryPersistence, store: TaskStore) -> AppState:
    return AppState(settings=settings, persistence=persistence, task_store=store)
