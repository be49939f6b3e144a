# src/terminal_todo/persistence/codec.py

"""
JSON codec for StoreState.

Wire layout (kept compatible with previously saved data):
    {"tasks": [{"id": 1, "title": "...", "done": false}, ...], "nextId": 2}

Decoding is strict about task entries (any malformed entry -> ParseError) and
lenient about the counter: a missing/invalid/too-small counter is recomputed
from the existing ids.
"""

from __future__ import annotations

import json
from typing import Any

from ..core.errors import ParseError
from ..tasks.task_models import StoreState, Task

NEXT_ID_KEY = "nextId"


def encode_state(state: StoreState) -> str:
    payload = {
        "tasks": [t.to_dict() for t in state.tasks],
        NEXT_ID_KEY: state.next_id,
    }
    return json.dumps(payload, ensure_ascii=False)


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; a stored `true` is not an id.
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_task(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise ParseError(f"task entry is not an object: {raw!r}")

    tid = raw.get("id")
    if not _is_int(tid) or tid <= 0:
        raise ParseError(f"invalid task id: {tid!r}")

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ParseError(f"invalid title for task {tid}")

    done = raw.get("done", False)
    if not isinstance(done, bool):
        raise ParseError(f"invalid done flag for task {tid}: {done!r}")

    return Task(id=tid, title=title, done=done)


def decode_state(raw: str) -> StoreState:
    """
    Parse a persisted payload.

    Raises ParseError on anything that cannot become a well-formed state.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParseError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("payload is not an object")

    raw_tasks = data.get("tasks")
    if not isinstance(raw_tasks, list):
        raw_tasks = []

    tasks: list[Task] = []
    seen: set[int] = set()
    for item in raw_tasks:
        task = _decode_task(item)
        if task.id in seen:
            raise ParseError(f"duplicate task id: {task.id}")
        seen.add(task.id)
        tasks.append(task)

    floor = max(seen, default=0) + 1
    next_id = data.get(NEXT_ID_KEY)
    if not _is_int(next_id) or next_id < floor:
        next_id = floor

    return StoreState(tasks=tasks, next_id=next_id)
