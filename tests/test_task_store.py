# tests/test_task_store.py

from __future__ import annotations

import pytest

from terminal_todo.core.errors import NotFoundError, ValidationError
from terminal_todo.persistence import MemoryPersistence
from terminal_todo.tasks.task_store import TaskStore

from .fakes import FailingPersistence


@pytest.mark.parametrize("title", ["buy milk", "  padded title  ", "multi   word\ttitle", "ünïcode ✓"])
def test_add_then_find_returns_open_task_with_trimmed_title(store: TaskStore, title: str) -> None:
    task = store.add(title)
    found = store.find(task.id)
    assert found is not None
    assert found.title == title.strip()
    assert found.done is False


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_add_rejects_blank_title(store: TaskStore, persistence: MemoryPersistence, title: str) -> None:
    with pytest.raises(ValidationError, match="Cannot add empty task."):
        store.add(title)
    assert store.tasks() == []
    assert store.next_id == 1
    assert persistence.writes == 0


def test_ids_strictly_increase_and_are_never_reused(store: TaskStore) -> None:
    ids = [store.add("a").id, store.add("b").id]
    store.remove(ids[1])
    ids.append(store.add("c").id)
    store.remove(ids[0])
    store.remove(ids[2])
    ids.append(store.add("d").id)
    assert ids == [1, 2, 3, 4]
    assert store.next_id == 5


def test_clear_resets_counter(store: TaskStore) -> None:
    store.add("a")
    store.add("b")
    store.clear()
    assert store.tasks() == []
    assert store.add("x").id == 1


def test_set_done_and_reopen(store: TaskStore) -> None:
    task = store.add("a")
    assert store.set_done(task.id, True).done is True
    assert store.find(task.id).done is True
    assert store.set_done(task.id, False).done is False


def test_edit_keeps_id_and_validates(store: TaskStore) -> None:
    task = store.add("old")
    edited = store.edit(task.id, "  new title ")
    assert edited.id == task.id
    assert store.find(task.id).title == "new title"

    with pytest.raises(ValidationError, match="New text cannot be empty."):
        store.edit(task.id, "   ")
    assert store.find(task.id).title == "new title"


def test_edit_checks_existence_before_text(store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        store.edit(9, "")


def test_remove_preserves_order(store: TaskStore) -> None:
    for title in ("a", "b", "c"):
        store.add(title)
    store.remove(2)
    assert [t.title for t in store.tasks()] == ["a", "c"]


@pytest.mark.parametrize("op", ["set_done", "edit", "remove", "get"])
def test_missing_id_raises_not_found(store: TaskStore, op: str) -> None:
    store.add("a")
    with pytest.raises(NotFoundError) as exc:
        if op == "set_done":
            store.set_done(42, True)
        elif op == "edit":
            store.edit(42, "x")
        else:
            getattr(store, op)(42)
    assert exc.value.task_id == 42
    assert str(exc.value) == "Task 42 not found."


def test_find_missing_returns_none(store: TaskStore) -> None:
    assert store.find(1) is None


def test_every_mutation_persists(store: TaskStore, persistence: MemoryPersistence) -> None:
    task = store.add("a")
    store.set_done(task.id, True)
    store.edit(task.id, "b")
    store.remove(task.id)
    store.clear()
    assert persistence.writes == 5

    reloaded = TaskStore(persistence)
    assert reloaded.tasks() == []
    assert reloaded.next_id == 1


def test_store_reloads_saved_state() -> None:
    persistence = MemoryPersistence()
    first = TaskStore(persistence)
    first.add("a")
    first.add("b")
    first.set_done(1, True)

    second = TaskStore(persistence)
    assert [(t.id, t.title, t.done) for t in second.tasks()] == [(1, "a", True), (2, "b", False)]
    assert second.add("c").id == 3


def test_snapshot_is_detached(store: TaskStore) -> None:
    store.add("a")
    snap = store.snapshot()
    snap.tasks[0].title = "mutated"
    snap.next_id = 99
    assert store.find(1).title == "a"
    assert store.next_id == 2


def test_failed_save_rolls_back_every_mutation() -> None:
    persistence = FailingPersistence()
    store = TaskStore(persistence)
    store.add("a")
    store.add("b")
    before = store.snapshot()

    persistence.fail = True
    with pytest.raises(OSError):
        store.add("c")
    with pytest.raises(OSError):
        store.set_done(1, True)
    with pytest.raises(OSError):
        store.edit(1, "renamed")
    with pytest.raises(OSError):
        store.remove(2)
    with pytest.raises(OSError):
        store.clear()

    assert store.snapshot() == before
    assert TaskStore(persistence).snapshot() == before

    persistence.fail = False
    assert store.add("c").id == 3
