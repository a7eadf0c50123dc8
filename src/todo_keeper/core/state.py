# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (autosave, paths).
    settings: object

    task_store: TaskRepo
    tasks_path: Path
