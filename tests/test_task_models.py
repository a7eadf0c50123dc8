# tests/test_task_models.py

from __future__ import annotations

import pytest

from todo_keeper.tasks.task_models import DeadlineParseError, Task, TaskLineError


def test_display_plain_and_categorized() -> None:
    plain = Task("Buy milk", "01.01.2025")
    assert plain.display() == "[ ] " + "Buy milk".ljust(20) + " | Due: " + "01.01.2025".ljust(12)

    cat = Task("Report", "10.10.2024", completed=True, category="Work")
    assert cat.display() == (
        "[X] " + "Report".ljust(20) + " | Due: " + "10.10.2024".ljust(12) + " | Category: Work"
    )


def test_display_keeps_long_titles_whole() -> None:
    title = "A title that is clearly longer than twenty columns"
    assert title in Task(title, "1.1.2024").display()


def test_serialize_flag_and_optional_category() -> None:
    assert Task("a", "1.1.2024").serialize() == "a;1.1.2024;0"
    assert Task("a", "1.1.2024", completed=True, category="Home").serialize() == "a;1.1.2024;1;Home"


def test_mark_completed_is_idempotent() -> None:
    t = Task("a", "1.1.2024")
    t.mark_completed()
    t.mark_completed()
    assert t.completed is True
    assert t.serialize().endswith(";1")


def test_deadline_key_pads_day_and_month() -> None:
    assert Task("a", "1.1.2024").deadline_key() == 20240101
    assert Task("b", "15.03.2023").deadline_key() == 20230315
    assert Task("c", "02.02.2024").deadline_key() == 20240202


@pytest.mark.parametrize(
    "deadline",
    ["", "tomorrow", "1.1", "1.1.2024.5", "aa.bb.cccc", "1..2024", "1.1.²", "١.١.٢٠٢٤"],
)
def test_deadline_key_rejects_malformed(deadline: str) -> None:
    with pytest.raises(DeadlineParseError):
        Task("x", deadline).deadline_key()


def test_from_line_plain_and_categorized() -> None:
    t = Task.from_line("Buy milk;01.01.2025;0")
    assert (t.title, t.deadline, t.completed, t.category) == ("Buy milk", "01.01.2025", False, "")

    c = Task.from_line("Report;10.10.2024;1;Work")
    assert c.completed is True
    assert c.category == "Work"
    assert c.is_categorized


def test_from_line_flag_only_true_for_one() -> None:
    assert Task.from_line("a;1.1.2024;yes").completed is False
    assert Task.from_line("a;1.1.2024;").completed is False


def test_from_line_ignores_fields_after_category() -> None:
    t = Task.from_line("a;1.1.2024;0;Home;extra;more")
    assert t.category == "Home"
    assert t.serialize() == "a;1.1.2024;0;Home"


@pytest.mark.parametrize("line", ["just a title", "title;1.1.2024", ""])
def test_from_line_rejects_malformed(line: str) -> None:
    with pytest.raises(TaskLineError):
        Task.from_line(line)


def test_str_is_short_form() -> None:
    assert str(Task("Buy milk", "01.01.2025")) == "[ ] Buy milk (Due: 01.01.2025)"
    assert str(Task("Buy milk", "01.01.2025", completed=True)) == "[X] Buy milk (Due: 01.01.2025)"


def test_from_line_accepts_empty_title() -> None:
    t = Task.from_line(";1.1.2024;0")
    assert t.title == ""
    assert t.serialize() == ";1.1.2024;0"
