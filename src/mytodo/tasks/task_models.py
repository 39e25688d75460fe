# src/mytodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - id, title and due_date never change after creation.
    - is_done changes only through the store, which swaps in a new value
      built with `with_done()`.
    """

    id: int
    title: str
    due_date: date | None = None
    is_done: bool = False

    def with_done(self, is_done: bool) -> Task:
        return replace(self, is_done=is_done)
