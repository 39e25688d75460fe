# src/mytodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands and connectors depend on this Protocol instead of the concrete
TaskStore, which keeps the store swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def add_task(self, title: str, due_date: date | None = None) -> Task: ...
    def list_tasks(self) -> tuple[Task, ...]: ...
    def get_task(self, task_id: int) -> Task | None: ...

    # Mutations return False when the id does not exist.
    def complete_task(self, task_id: int) -> bool: ...
    def toggle_task(self, task_id: int) -> bool: ...
    def delete_task(self, task_id: int) -> bool: ...

    def seed(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
    def count_done(self) -> int: ...
