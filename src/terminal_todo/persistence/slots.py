# src/terminal_todo/persistence/slots.py

from __future__ import annotations

import contextlib
import logging
import os
import sqlite3
from pathlib import Path

from ..core.errors import ParseError
from ..tasks.task_models import StoreState
from .codec import decode_state, encode_state

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "terminal_todo_items_v1"


class KeyValuePersistence:
    """
    Persistence on top of a string key-value slot.

    Subclasses only move raw strings in and out (_read_raw/_write_raw);
    encoding, decoding and the soft reset on corrupted data live here.
    """

    def __init__(self, key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key or not key.strip():
            raise ValueError("storage key is required")
        self.key = key.strip()

    def _read_raw(self) -> str | None:
        raise NotImplementedError

    def _write_raw(self, value: str) -> None:
        raise NotImplementedError

    def save(self, state: StoreState) -> None:
        self._write_raw(encode_state(state))
        logger.debug(
            "State saved key=%s tasks=%d next_id=%d", self.key, len(state.tasks), state.next_id
        )

    def load(self) -> StoreState:
        raw = self._read_raw()
        if not raw:
            return StoreState.empty()
        try:
            state = decode_state(raw)
        except ParseError as e:
            logger.warning("Corrupted state under key=%s, resetting: %s", self.key, e)
            return StoreState.empty()
        logger.debug(
            "State loaded key=%s tasks=%d next_id=%d", self.key, len(state.tasks), state.next_id
        )
        return state


class MemoryPersistence(KeyValuePersistence):
    """In-process slot. Nothing survives the process; used by tests and the `memory` backend."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY, initial: str | None = None) -> None:
        super().__init__(key)
        self.slots: dict[str, str] = {}
        self.writes = 0
        if initial is not None:
            self.slots[self.key] = initial

    def _read_raw(self) -> str | None:
        return self.slots.get(self.key)

    def _write_raw(self, value: str) -> None:
        self.slots[self.key] = value
        self.writes += 1


class JsonFilePersistence(KeyValuePersistence):
    """
    One JSON file per key inside `directory`.

    Writes go to a temp file first and are swapped in with os.replace.
    """

    def __init__(self, directory: str | Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        super().__init__(key)
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._dir / f"{self.key}.json"

    def _read_raw(self) -> str | None:
        path = self.path
        if not path.exists():
            return None
        try:
            return path.read_text("utf-8")
        except UnicodeDecodeError:
            logger.warning("State file %s is not valid UTF-8.", path)
            return None

    def _write_raw(self, value: str) -> None:
        path = self.path
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, "utf-8")
        os.replace(tmp, path)
        with contextlib.suppress(OSError):
            # Best-effort: keep the file private on disk.
            os.chmod(path, 0o600)


class SqlitePersistence(KeyValuePersistence):
    """
    SQLite key-value slot.

    Single table `kv(key, value)`; each call opens its own short-lived connection.
    """

    def __init__(self, db_path: str | Path = "todo.sqlite3", key: str = DEFAULT_STORAGE_KEY) -> None:
        super().__init__(key)
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqlitePersistence ready db=%s key=%s", self._db_path, self.key)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        try:
            self._create_schema()
        except sqlite3.DatabaseError as e:
            # Unreadable file: set it aside and start from an empty slot.
            corrupt = self._db_path.with_name(self._db_path.name + ".corrupt")
            logger.warning(
                "State db %s is corrupted (%s), moving it to %s and resetting.",
                self._db_path,
                e,
                corrupt,
            )
            os.replace(self._db_path, corrupt)
            for suffix in ("-wal", "-shm"):
                with contextlib.suppress(FileNotFoundError):
                    os.remove(self._db_path.with_name(self._db_path.name + suffix))
            self._create_schema()

    def _create_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def _read_raw(self) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.execute("SELECT value FROM kv WHERE key = ?", (self.key,))
            row = cur.fetchone()
        except sqlite3.DatabaseError as e:
            logger.warning("Cannot read state db %s, treating slot as empty: %s", self._db_path, e)
            return None
        finally:
            conn.close()
        return None if row is None else str(row[0])

    def _write_raw(self, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (self.key, value),
            )
            conn.commit()
        finally:
            conn.close()
