# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def run_console_loop(state: AppState) -> None:
    """Read slash commands from stdin until /exit, EOF or Ctrl+C."""
    logger.info("Console connector started (tasks=%s).", state.tasks_path)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    print(f"[{app_name}] Type /help for commands. Use /exit to save and quit.\n")

    while True:
        try:
            user_input = input(f"{app_name}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."

        print(reply)

    logger.info("Console connector finished.")
