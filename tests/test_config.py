# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from terminal_todo.config import DEFAULT_STORAGE_KEY, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TODO_APP_NAME",
        "TODO_LOG_LEVEL",
        "TODO_DATA_DIR",
        "TODO_STORAGE_BACKEND",
        "TODO_STORAGE_KEY",
        "TODO_STATE_DB_PATH",
        "TODO_STATE_DIR",
        "TODO_COLOR",
        "TODO_HISTORY_SIZE",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Terminal TODO"
    assert s.log_level == "WARNING"
    assert s.storage_backend == "sqlite"
    assert s.storage_key == DEFAULT_STORAGE_KEY
    assert s.data_dir == Path(".local/todo")
    assert s.state_db_path == Path(".local/todo") / "todo.sqlite3"
    assert s.state_dir == Path(".local/todo") / "state"
    assert s.history_size == 500


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_STORAGE_BACKEND", " JSON ")
    monkeypatch.setenv("TODO_STORAGE_KEY", "other_key")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_COLOR", "yes")
    monkeypatch.setenv("TODO_HISTORY_SIZE", "10")
    s = Settings.from_env()
    assert s.storage_backend == "json"
    assert s.storage_key == "other_key"
    assert s.log_level == "DEBUG"
    assert s.color is True
    assert s.history_size == 10
    assert s.state_db_path == tmp_path / "todo.sqlite3"
    assert s.state_dir == tmp_path / "state"


def test_unknown_backend_falls_back_to_sqlite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_STORAGE_BACKEND", "redis")
    assert Settings.from_env().storage_backend == "sqlite"


def test_no_color_disables_color_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color is False
    monkeypatch.setenv("TODO_COLOR", "1")
    assert Settings.from_env().color is True


def test_bad_history_size_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_HISTORY_SIZE", "lots")
    assert Settings.from_env().history_size == 500
    monkeypatch.setenv("TODO_HISTORY_SIZE", "-4")
    assert Settings.from_env().history_size == 0


def test_default_storage_key_matches_persistence_default() -> None:
    from terminal_todo.persistence import MemoryPersistence

    assert MemoryPersistence().key == Settings.from_env().storage_key == DEFAULT_STORAGE_KEY
