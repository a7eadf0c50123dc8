# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the TaskStore into AppState,
- loads the task file at startup and writes it back at shutdown.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    Path(settings.tasks_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings stay injectable so tests can point everything at tmp_path.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=Path(settings.tasks_path),
    )


def load_tasks(state: AppState) -> int:
    """Fill the store from the task file. A missing file leaves the store empty."""
    return state.task_store.load_from_file(state.tasks_path)


def save_tasks(state: AppState) -> None:
    """Write the store to the task file. OSError propagates to the caller."""
    state.task_store.save_to_file(state.tasks_path)
