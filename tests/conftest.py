# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.core.state import AppState
from todo_keeper.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.txt",
        autosave=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with a real, empty TaskStore and a task file under tmp_path."""
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=settings.tasks_path,
    )
