# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file),
runs the console REPL and writes the task file back on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, load_tasks, save_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> bool:
    """Flush the store to disk. Returns False (after logging) if the write failed."""
    try:
        save_tasks(state)
    except OSError:
        logger.exception("Failed to save tasks to %s", state.tasks_path)
        return False
    return True


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "log_dir", ".local/todo")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    state = create_initial_state(settings=settings)
    load_tasks(state)

    ok = True
    try:
        run_console_loop(state)
    finally:
        ok = _shutdown(state)
        logger.info("Bye.")

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
