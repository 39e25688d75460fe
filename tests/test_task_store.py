# tests/test_task_store.py

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from mytodo.tasks.task_models import Task
from mytodo.tasks.task_store import TaskStore


def test_add_assigns_increasing_ids_and_defaults(store: TaskStore) -> None:
    t1 = store.add_task("Buy milk", date(2024, 6, 2))
    t2 = store.add_task("Call mechanic")

    assert t1 == Task(id=1, title="Buy milk", due_date=date(2024, 6, 2), is_done=False)
    assert t2.id == 2
    assert t2.due_date is None
    assert t2.is_done is False


def test_ids_never_reused_after_delete(store: TaskStore) -> None:
    ids = [store.add_task(f"t{i}").id for i in range(3)]
    assert store.delete_task(ids[-1])
    assert store.delete_task(ids[0])

    later = [store.add_task("again").id, store.add_task("more").id]
    all_ids = ids + later
    assert all_ids == sorted(all_ids)
    assert len(set(all_ids)) == len(all_ids)
    assert later == [4, 5]


def test_first_id_is_configurable() -> None:
    store = TaskStore(first_id=100)
    assert store.add_task("a").id == 100
    assert store.add_task("b").id == 101


def test_get_task_returns_added_task(store: TaskStore) -> None:
    task = store.add_task("X")
    assert store.get_task(task.id) == task
    assert store.get_task(999) is None


def test_store_does_not_reject_titles(store: TaskStore) -> None:
    # Title validation belongs to the caller.
    assert store.add_task("").title == ""


def test_delete_returns_true_exactly_once(store: TaskStore) -> None:
    task = store.add_task("X")
    assert store.delete_task(task.id) is True
    assert store.delete_task(task.id) is False
    assert store.get_task(task.id) is None


def test_complete_is_idempotent(store: TaskStore) -> None:
    task = store.add_task("X")
    assert store.complete_task(task.id) is True
    assert store.get_task(task.id).is_done is True
    assert store.complete_task(task.id) is True
    assert store.get_task(task.id).is_done is True


def test_complete_unknown_or_deleted_id_returns_false(store: TaskStore) -> None:
    assert store.complete_task(1) is False
    task = store.add_task("X")
    store.delete_task(task.id)
    assert store.complete_task(task.id) is False
    assert store.toggle_task(task.id) is False


def test_toggle_twice_restores_state(store: TaskStore) -> None:
    task = store.add_task("X")
    assert store.toggle_task(task.id) is True
    assert store.get_task(task.id).is_done is True
    assert store.toggle_task(task.id) is True
    assert store.get_task(task.id).is_done is False


def test_toggle_after_complete_reopens(store: TaskStore) -> None:
    task = store.add_task("X")
    store.complete_task(task.id)
    store.toggle_task(task.id)
    assert store.get_task(task.id).is_done is False


def test_list_preserves_insertion_order_across_deletes(store: TaskStore) -> None:
    for title in ("a", "b", "c", "d"):
        store.add_task(title)
    store.delete_task(2)
    store.add_task("e")
    store.complete_task(3)

    assert [t.title for t in store.list_tasks()] == ["a", "c", "d", "e"]
    assert len(store.list_tasks()) == len(store) == store.count_tasks() == 4


def test_list_is_a_snapshot(store: TaskStore) -> None:
    store.add_task("a")
    snapshot = store.list_tasks()
    store.add_task("b")
    store.complete_task(1)

    assert isinstance(snapshot, tuple)
    assert [t.title for t in snapshot] == ["a"]
    assert snapshot[0].is_done is False


def test_tasks_are_immutable_values(store: TaskStore) -> None:
    task = store.add_task("X")
    with pytest.raises(FrozenInstanceError):
        task.is_done = True  # type: ignore[misc]
    store.complete_task(task.id)
    # The caller's copy is untouched; the store holds the new value.
    assert task.is_done is False
    assert store.get_task(task.id).is_done is True


def test_scenario_from_walkthrough(store: TaskStore) -> None:
    t1 = store.add_task("Buy milk", date(2024, 6, 2))
    assert (t1.id, t1.title, t1.due_date, t1.is_done) == (1, "Buy milk", date(2024, 6, 2), False)
    t2 = store.add_task("Call mechanic", None)
    assert t2.id == 2

    assert store.complete_task(1) is True
    assert [(t.id, t.is_done) for t in store.list_tasks()] == [(1, True), (2, False)]

    assert store.delete_task(1) is True
    assert store.delete_task(1) is False
    assert [t.id for t in store.list_tasks()] == [2]


def test_seed_adds_sample_tasks_relative_to_today(store: TaskStore) -> None:
    created = store.seed()

    assert [t.title for t in created] == ["Buy milk", "Finish Module 1 notes", "Call the mechanic"]
    assert [t.due_date for t in created] == [date(2024, 6, 2), date(2024, 6, 3), None]
    assert [t.id for t in created] == [1, 2, 3]
    assert store.count_done() == 0


def test_count_done(store: TaskStore) -> None:
    store.seed()
    store.complete_task(1)
    store.toggle_task(3)
    assert store.count_done() == 2
