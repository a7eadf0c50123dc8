# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task
from .bootstrap import save_tasks

CommandHandler = Callable[[AppState, list[str]], str]

ARG_SEP = "|"

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_fields(args: list[str]) -> list[str]:
    """Rejoin whitespace-split args and split on '|' so titles may contain spaces."""
    return [p.strip() for p in " ".join(args).split(ARG_SEP)]


def _lines_or(lines: list[str], empty: str) -> str:
    return "\n".join(lines) if lines else empty


def _save_failed(state: AppState, e: OSError) -> str:
    logger.exception("Failed to save tasks to %s", state.tasks_path)
    return f"Could not save tasks to {state.tasks_path}: {e}"


def _after_mutation(state: AppState, reply: str) -> str:
    """Autosave if enabled. A failed save is appended to the reply; the change stays in memory."""
    if not getattr(state.settings, "autosave", False):
        return reply
    try:
        save_tasks(state)
    except OSError as e:
        return f"{reply}\n{_save_failed(state, e)}"
    return reply


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> | <deadline>              -> plain task
    /add <title> | <deadline> | <category> -> categorized task
    """
    fields = _split_fields(args)
    if len(fields) < 2 or not fields[0]:
        return "Usage: /add <title> | <DD.MM.YYYY> [| <category>]"

    title, deadline = fields[0], fields[1]
    category = fields[2] if len(fields) > 2 else ""
    task = Task(title=title, deadline=deadline, category=category)
    state.task_store.add(task)
    return _after_mutation(state, f"Added: {task}")


def cmd_list(state: AppState, args: list[str]) -> str:
    return _lines_or(state.task_store.list_tasks(sorted_by_deadline=False), "(no tasks yet)")


def cmd_sorted(state: AppState, args: list[str]) -> str:
    return _lines_or(state.task_store.list_tasks(sorted_by_deadline=True), "(no tasks yet)")


def cmd_completed(state: AppState, args: list[str]) -> str:
    return _lines_or(state.task_store.list_completed(), "(no completed tasks)")


def cmd_done(state: AppState, args: list[str]) -> str:
    title = " ".join(args).strip()
    if not title:
        return "Usage: /done <title>"
    if not state.task_store.complete(title):
        return f"No active task titled '{title}'."
    return _after_mutation(state, f"Completed: {title}")


def cmd_delete(state: AppState, args: list[str]) -> str:
    title = " ".join(args).strip()
    if not title:
        return "Usage: /delete <title>"
    if not state.task_store.delete(title):
        return f"No active task titled '{title}'."
    return _after_mutation(state, f"Deleted: {title}")


def cmd_search(state: AppState, args: list[str]) -> str:
    query = " ".join(args)
    return _lines_or(state.task_store.search(query), f"No tasks matching '{query}'.")


def cmd_categories(state: AppState, args: list[str]) -> str:
    cats = state.task_store.list_categories()
    if not cats:
        return "No categories yet."
    return "\n".join(["Available categories:"] + [f" - {c}" for c in cats])


def cmd_category(state: AppState, args: list[str]) -> str:
    category = " ".join(args).strip()
    cats, lines = state.task_store.filter_by_category(category)
    out = ["Available categories to choose from:"]
    out.extend(f" - {c}" for c in cats)
    out.append("")
    out.append(f"Showing tasks for category: {category}")
    out.extend(lines or ["(none)"])
    return "\n".join(out)


def cmd_save(state: AppState, args: list[str]) -> str:
    try:
        save_tasks(state)
    except OSError as e:
        return _save_failed(state, e)
    return f"Saved to {state.tasks_path}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> | <DD.MM.YYYY> [| <category>].")
registry.register("list", cmd_list, help_text="Show active tasks.", aliases=["ls"])
registry.register("sorted", cmd_sorted, help_text="Show active tasks sorted by deadline.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <title>.")
registry.register("delete", cmd_delete, help_text="Delete an active task: /delete <title>.", aliases=["rm"])
registry.register("completed", cmd_completed, help_text="Show completed tasks.")
registry.register("search", cmd_search, help_text="Search titles (case-sensitive): /search <text>.")
registry.register("category", cmd_category, help_text="Show tasks in a category: /category <name>.")
registry.register("categories", cmd_categories, help_text="List known categories.")
registry.register("save", cmd_save, help_text="Write tasks to the task file now.")
