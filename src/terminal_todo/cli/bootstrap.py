# src/terminal_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the persistence backend and wires the TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Persistence
from ..core.state import AppState
from ..persistence import JsonFilePersistence, MemoryPersistence, SqlitePersistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_backend == "sqlite":
        settings.state_db_path.parent.mkdir(parents=True, exist_ok=True)
    elif settings.storage_backend == "json":
        settings.state_dir.mkdir(parents=True, exist_ok=True)


def create_persistence(settings) -> Persistence:
    backend = settings.storage_backend
    key = settings.storage_key
    if backend == "json":
        return JsonFilePersistence(settings.state_dir, key=key)
    if backend == "memory":
        logger.info("Using in-memory storage; tasks will not survive this session.")
        return MemoryPersistence(key=key)
    return SqlitePersistence(settings.state_db_path, key=key)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    persistence = create_persistence(settings)
    return AppState(
        settings=settings,
        persistence=persistence,
        task_store=TaskStore(persistence),
    )
