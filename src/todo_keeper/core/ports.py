# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore directly,
so tests can hand in a fake repo when the file codec is not under test.
"""

from pathlib import Path
from typing import Protocol


class TaskRepo(Protocol):
    # CRUD
    def add(self, task) -> None: ...
    def complete(self, title: str) -> bool: ...
    def delete(self, title: str) -> bool: ...

    # Display views
    def list_tasks(self, sorted_by_deadline: bool = False) -> list[str]: ...
    def list_completed(self) -> list[str]: ...
    def search(self, query: str) -> list[str]: ...
    def list_categories(self) -> list[str]: ...
    def filter_by_category(self, category: str) -> tuple[list[str], list[str]]: ...

    # Persistence
    def save_to_file(self, path: str | Path) -> None: ...
    def load_from_file(self, path: str | Path) -> int: ...
