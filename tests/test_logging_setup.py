# tests/test_logging_setup.py

from __future__ import annotations

import logging

from todo_keeper.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_keeper.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))
