# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from mytodo.core.state import AppState
from mytodo.tasks.task_store import TaskStore

FIXED_TODAY = date(2024, 6, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="mytodo",
        log_level="INFO",
        data_dir=tmp_path / "data",
        log_file=tmp_path / "data" / "mytodo.log",
        first_id=1,
        seed_on_start=False,
        confirm_delete=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(today=lambda: FIXED_TODAY)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, confirm_delete=settings.confirm_delete)
