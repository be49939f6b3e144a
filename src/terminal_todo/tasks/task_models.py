# src/terminal_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Task:
    id: int
    title: str
    done: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "title": self.title, "done": self.done}


@dataclass(slots=True)
class StoreState:
    """
    Snapshot of the task list.

    Invariants:
    - task ids are unique
    - next_id is greater than every task id
    """

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    @classmethod
    def empty(cls) -> StoreState:
        return cls(tasks=[], next_id=1)

    def copy(self) -> StoreState:
        return StoreState(
            tasks=[Task(id=t.id, title=t.title, done=t.done) for t in self.tasks],
            next_id=self.next_id,
        )
