# src/terminal_todo/core/errors.py

"""
Error kinds.

All of them are recovered before reaching the user:
- ValidationError / NotFoundError / UnknownCommandError at the dispatch boundary,
- ParseError inside the persistence adapter (silent reset).
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for expected, user-recoverable errors."""


class ValidationError(TodoError):
    """Empty title, malformed id, missing arguments."""


class NotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class ParseError(TodoError):
    """Persisted payload could not be decoded into a well-formed state."""


class UnknownCommandError(TodoError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown command: {token}. Type 'help'.")
        self.token = token
