# src/mytodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings kept on the state for easy access in command handlers.
    settings: object

    task_store: TaskRepo
    confirm_delete: bool = True
