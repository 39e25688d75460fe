# src/mytodo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    One insertion-ordered dict keyed by id is both the ordered collection
    and the id index, so listing order and lookups cannot diverge.

    Ids come from a monotonic counter starting at `first_id`; a deleted id
    is never handed out again.

    Single-threaded: callers issue one operation at a time.
    """

    def __init__(self, *, first_id: int = 1, today: Callable[[], date] = date.today) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = first_id
        self._today = today
        logger.info("TaskStore ready first_id=%s", first_id)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def count_done(self) -> int:
        return sum(1 for t in self._tasks.values() if t.is_done)

    def add_task(self, title: str, due_date: date | None = None) -> Task:
        """
        Create a task and return it.

        The title is taken as-is: trimming and rejecting empty titles is the
        caller's job.
        """
        task = Task(id=self._next_id, title=title, due_date=due_date)
        self._next_id += 1
        self._tasks[task.id] = task
        logger.debug("Task added id=%s due_date=%s", task.id, due_date)
        return task

    def list_tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order (snapshot)."""
        return tuple(self._tasks.values())

    def get_task(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def complete_task(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("complete_task: id=%s not found", task_id)
            return False
        if not task.is_done:
            self._tasks[task_id] = task.with_done(True)
        logger.debug("Task completed id=%s", task_id)
        return True

    def toggle_task(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("toggle_task: id=%s not found", task_id)
            return False
        self._tasks[task_id] = task.with_done(not task.is_done)
        logger.debug("Task toggled id=%s is_done=%s", task_id, not task.is_done)
        return True

    def delete_task(self, task_id: int) -> bool:
        if self._tasks.pop(task_id, None) is None:
            logger.debug("delete_task: id=%s not found", task_id)
            return False
        logger.debug("Task deleted id=%s", task_id)
        return True

    def seed(self) -> list[Task]:
        """Add the sample tasks used for demos."""
        today = self._today()
        created = [
            self.add_task("Buy milk", today + timedelta(days=1)),
            self.add_task("Finish Module 1 notes", today + timedelta(days=2)),
            self.add_task("Call the mechanic"),
        ]
        logger.info("Seeded %d sample tasks", len(created))
        return created
