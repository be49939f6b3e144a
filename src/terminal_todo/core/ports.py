# src/terminal_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on a Protocol instead of a concrete backend.
This keeps storage swappable (SQLite, JSON file, in-memory) and makes testing easier.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from ..tasks.task_models import StoreState


class Persistence(Protocol):
    """Durable snapshot slot for the whole store state."""

    def save(self, state: StoreState) -> None: ...

    def load(self) -> StoreState: ...


class MessageCategory(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Message:
    """
    One line of dispatcher output.

    `label` is the short prefix shown before the text (e.g. "added", "error").
    `done` is only meaningful for task lines produced by `list`.
    """

    category: MessageCategory
    label: str
    text: str
    done: bool = False
