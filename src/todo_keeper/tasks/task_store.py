# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from .task_models import DONE_PREFIX, DeadlineParseError, Task, TaskLineError

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store with flat-file persistence.

    Layout:
    - active: open tasks in insertion order
    - completed: tasks moved here by complete(), in completion order
    - by_title: title -> record, indexes active tasks only
    - categories: every non-empty category ever added; never shrinks

    Records are matched by identity, so a duplicate title added later shadows the
    older record in by_title while the older one stays in active.
    """

    def __init__(self) -> None:
        self._active: list[Task] = []
        self._completed: list[Task] = []
        self._by_title: dict[str, Task] = {}
        self._categories: set[str] = set()

    def __len__(self) -> int:
        return len(self._active)

    # ---- read-only views ----

    @property
    def active(self) -> tuple[Task, ...]:
        return tuple(self._active)

    @property
    def completed(self) -> tuple[Task, ...]:
        return tuple(self._completed)

    def get(self, title: str) -> Task | None:
        return self._by_title.get(title)

    # ---- mutations ----

    def add(self, task: Task) -> None:
        self._active.append(task)
        self._by_title[task.title] = task
        if task.category:
            self._categories.add(task.category)
        logger.debug("Task added title=%r deadline=%r category=%r", task.title, task.deadline, task.category)

    def complete(self, title: str) -> bool:
        """Move the active task with this title to the completed list. False if unknown."""
        task = self._by_title.pop(title, None)
        if task is None:
            return False
        task.mark_completed()
        self._completed.append(task)
        self._drop_active(task)
        logger.debug("Task completed title=%r", title)
        return True

    def delete(self, title: str) -> bool:
        """Drop the active task with this title. Categories are left untouched."""
        task = self._by_title.pop(title, None)
        if task is None:
            return False
        self._drop_active(task)
        logger.debug("Task deleted title=%r", title)
        return True

    def _drop_active(self, task: Task) -> None:
        self._active = [t for t in self._active if t is not task]

    # ---- queries (display lines) ----

    def list_tasks(self, sorted_by_deadline: bool = False) -> list[str]:
        """
        Display lines for active tasks.

        When sorting, tasks whose deadline does not parse are logged and listed
        after all dated tasks, in insertion order.
        """
        if not sorted_by_deadline:
            return [t.display() for t in self._active]

        dated: list[tuple[int, Task]] = []
        undated: list[Task] = []
        for t in self._active:
            try:
                dated.append((t.deadline_key(), t))
            except DeadlineParseError as e:
                logger.warning("Cannot sort by deadline: %s", e)
                undated.append(t)

        dated.sort(key=lambda pair: pair[0])
        return [t.display() for _, t in dated] + [t.display() for t in undated]

    def list_completed(self) -> list[str]:
        return [t.display() for t in self._completed]

    def search(self, query: str) -> list[str]:
        """Case-sensitive substring match on titles; an empty query matches everything."""
        return [t.display() for t in self._active if query in t.title]

    def list_categories(self) -> list[str]:
        return sorted(self._categories)

    def filter_by_category(self, category: str) -> tuple[list[str], list[str]]:
        """
        Return (known categories, display lines of active tasks in `category`).

        Matching is exact and case-sensitive; unknown or empty category -> no tasks.
        """
        lines = [t.display() for t in self._active if t.category and t.category == category]
        return self.list_categories(), lines

    # ---- persistence ----

    def save_to_file(self, path: str | Path) -> None:
        """
        Overwrite `path` with active tasks, then completed tasks prefixed with DONE:.

        The file is written next to the target and moved into place. OSError propagates.
        """
        path = Path(path)
        lines = [t.serialize() for t in self._active]
        lines.extend(DONE_PREFIX + t.serialize() for t in self._completed)

        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
            os.replace(tmp, path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.info(
            "Saved tasks to %s (active=%d completed=%d)", path, len(self._active), len(self._completed)
        )

    def load_from_file(self, path: str | Path) -> int:
        """
        Load tasks from `path`, appending to the current contents.

        - missing file -> nothing to load (returns 0)
        - DONE: lines go straight to the completed list (no title index, no category)
        - other lines go through add()
        - blank lines are skipped; malformed or undecodable lines are logged and skipped

        Returns the number of records loaded.
        """
        path = Path(path)
        if not path.exists():
            logger.info("Task file %s does not exist; starting empty.", path)
            return 0

        loaded = 0
        with open(path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    logger.warning("Skipping %s:%d: not valid UTF-8 (%s)", path, lineno, e.reason)
                    continue
                if not line.strip():
                    continue

                is_done = line.startswith(DONE_PREFIX)
                if is_done:
                    line = line[len(DONE_PREFIX) :]

                try:
                    task = Task.from_line(line)
                except TaskLineError as e:
                    logger.warning("Skipping %s:%d: %s", path, lineno, e)
                    continue

                if is_done:
                    self._completed.append(task)
                else:
                    self.add(task)
                loaded += 1

        logger.info(
            "Loaded %d tasks from %s (active=%d completed=%d)",
            loaded,
            path,
            len(self._active),
            len(self._completed),
        )
        return loaded
