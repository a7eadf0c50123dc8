# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

FIELD_SEP = ";"
DONE_PREFIX = "DONE:"

TITLE_WIDTH = 20
DEADLINE_WIDTH = 12


class DeadlineParseError(ValueError):
    """Deadline is not three dot-separated numeric fields (DD.MM.YYYY)."""


class TaskLineError(ValueError):
    """A task-file line cannot be turned into a Task."""


def _is_ascii_number(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other digits int() rejects.
    return s.isascii() and s.isdigit()


@dataclass(slots=True, eq=False)
class Task:
    """
    One to-do item.

    Notes:
    - deadline is free text, expected as DD.MM.YYYY but never validated on construction.
    - an empty category means "uncategorized"; only categorized tasks carry the 4th file field.
    - eq=False: the store tells records apart by identity, not by field values.
    """

    title: str
    deadline: str
    completed: bool = False
    category: str = ""

    @property
    def is_categorized(self) -> bool:
        return bool(self.category)

    def mark_completed(self) -> None:
        self.completed = True

    def display(self) -> str:
        marker = "[X] " if self.completed else "[ ] "
        line = f"{marker}{self.title:<{TITLE_WIDTH}} | Due: {self.deadline:<{DEADLINE_WIDTH}}"
        if self.is_categorized:
            line += f" | Category: {self.category}"
        return line

    def serialize(self) -> str:
        fields = [self.title, self.deadline, "1" if self.completed else "0"]
        if self.is_categorized:
            fields.append(self.category)
        return FIELD_SEP.join(fields)

    def deadline_key(self) -> int:
        """
        Convert "DD.MM.YYYY" into the integer YYYYMMDD used for sorting.

        One-digit day/month are zero-padded ("1.1.2024" -> 20240101).
        Raises DeadlineParseError for anything that is not three numeric fields.
        """
        parts = self.deadline.split(".")
        if len(parts) != 3 or not all(_is_ascii_number(p.strip()) for p in parts):
            raise DeadlineParseError(f"invalid deadline {self.deadline!r} for task {self.title!r}")
        day, month, year = (p.strip() for p in parts)
        if len(day) == 1:
            day = "0" + day
        if len(month) == 1:
            month = "0" + month
        return int(year + month + day)

    @classmethod
    def from_line(cls, line: str) -> Task:
        """
        Parse "title;deadline;flag[;category]" (without the DONE: prefix).

        Fields past the fourth are ignored. The flag is true only for "1".
        """
        parts = line.split(FIELD_SEP)
        if len(parts) < 3:
            raise TaskLineError(f"expected at least 3 fields, got {len(parts)}: {line!r}")
        title, deadline, flag = parts[0], parts[1], parts[2]
        category = parts[3] if len(parts) > 3 else ""
        return cls(title=title, deadline=deadline, completed=(flag == "1"), category=category)

    def __str__(self) -> str:
        marker = "[X]" if self.completed else "[ ]"
        return f"{marker} {self.title} (Due: {self.deadline})"
