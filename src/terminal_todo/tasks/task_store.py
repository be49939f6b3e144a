# src/terminal_todo/tasks/task_store.py

from __future__ import annotations

import logging

from ..core.errors import NotFoundError, ValidationError
from ..core.ports import Persistence
from .task_models import StoreState, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list with a monotonically increasing id counter.

    - state is loaded once from the Persistence port on construction
    - every mutating call writes a snapshot back before returning
    - ids are never reused, except after clear() which resets the counter to 1
    """

    def __init__(self, persistence: Persistence) -> None:
        self._persistence = persistence
        self._state = persistence.load()
        logger.info(
            "TaskStore ready tasks=%d next_id=%d", len(self._state.tasks), self._state.next_id
        )

    # ---- low-level helpers ----

    def _persist(self, backup: StoreState) -> None:
        """Write the current state; on failure put `backup` back and re-raise."""
        try:
            self._persistence.save(self._state)
        except Exception:
            self._state = backup
            logger.exception("Failed to persist state; change rolled back.")
            raise

    @staticmethod
    def _clean_title(title: str, error: str) -> str:
        cleaned = (title or "").strip()
        if not cleaned:
            raise ValidationError(error)
        return cleaned

    # ---- queries ----

    @property
    def next_id(self) -> int:
        return self._state.next_id

    def tasks(self) -> list[Task]:
        return list(self._state.tasks)

    def snapshot(self) -> StoreState:
        return self._state.copy()

    def count_tasks(self) -> int:
        return len(self._state.tasks)

    def find(self, task_id: int) -> Task | None:
        for task in self._state.tasks:
            if task.id == task_id:
                return task
        return None

    def get(self, task_id: int) -> Task:
        task = self.find(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    # ---- mutations ----

    def add(self, title: str) -> Task:
        cleaned = self._clean_title(title, "Cannot add empty task.")
        backup = self._state.copy()
        task = Task(id=self._state.next_id, title=cleaned, done=False)
        self._state.tasks.append(task)
        self._state.next_id += 1
        self._persist(backup)
        logger.debug("Task added id=%s", task.id)
        return task

    def set_done(self, task_id: int, done: bool) -> Task:
        task = self.get(task_id)
        backup = self._state.copy()
        task.done = bool(done)
        self._persist(backup)
        logger.debug("Task %s done=%s", task.id, task.done)
        return task

    def edit(self, task_id: int, new_title: str) -> Task:
        task = self.get(task_id)
        new_title = self._clean_title(new_title, "New text cannot be empty.")
        backup = self._state.copy()
        task.title = new_title
        self._persist(backup)
        logger.debug("Task edited id=%s", task.id)
        return task

    def remove(self, task_id: int) -> Task:
        task = self.get(task_id)
        backup = self._state.copy()
        self._state.tasks = [t for t in self._state.tasks if t.id != task.id]
        self._persist(backup)
        logger.debug("Task removed id=%s", task.id)
        return task

    def clear(self) -> None:
        removed = len(self._state.tasks)
        backup = self._state
        self._state = StoreState.empty()
        self._persist(backup)
        logger.debug("Tasks cleared removed=%d", removed)
