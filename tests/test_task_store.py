# tests/test_task_store.py

from __future__ import annotations

from todo_app.services.task_store import TaskStore


def test_append_assigns_sequential_ids_in_order() -> None:
    store = TaskStore()

    titles = ["Buy milk", "Walk dog", "Write report"]
    for title in titles:
        store.append(title)

    tasks = store.snapshot()
    assert len(tasks) == len(titles)
    assert [t.id for t in tasks] == ["todo-1", "todo-2", "todo-3"]
    assert [t.title for t in tasks] == titles
    assert all(t.completed is False for t in tasks)


def test_mark_complete_only_touches_matching_task() -> None:
    store = TaskStore()
    store.append("a")
    store.append("b")

    store.mark_complete("todo-2")

    tasks = store.snapshot()
    assert tasks[0].completed is False
    assert tasks[1].completed is True
    assert tasks[1].title == "b"


def test_mark_complete_unknown_id_is_noop() -> None:
    store = TaskStore()
    store.append("a")
    before = store.snapshot()

    store.mark_complete("todo-99")

    assert store.snapshot() == before


def test_mark_complete_is_idempotent() -> None:
    store = TaskStore()
    store.append("a")

    store.mark_complete("todo-1")
    once = store.snapshot()
    store.mark_complete("todo-1")

    assert store.snapshot() == once
    assert once[0].completed is True


def test_snapshot_is_detached_from_store() -> None:
    store = TaskStore()
    store.append("a")

    snap = store.snapshot()
    snap.clear()

    assert len(store) == 1
    assert store.snapshot()[0].id == "todo-1"


def test_ids_are_not_reused_after_completion() -> None:
    store = TaskStore()
    store.append("a")
    store.mark_complete("todo-1")

    task = store.append("b")

    assert task.id == "todo-2"
