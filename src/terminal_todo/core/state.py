# src/terminal_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import Persistence


@dataclass
class AppState:
    # Store Settings on the state for easy access in connectors.
    settings: Any

    persistence: Persistence
    task_store: TaskStore

    # In-session input history (most recent last).
    history: list[str] = field(default_factory=list)

    def remember(self, line: str) -> bool:
        """Record a non-empty trimmed line; returns False for blank input."""
        line = line.strip()
        if not line:
            return False
        self.history.append(line)
        limit = int(getattr(self.settings, "history_size", 0) or 0)
        if limit and len(self.history) > limit:
            del self.history[: len(self.history) - limit]
        return True
