# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name, used as the console prompt (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>).",
    "TODO_TASKS_PATH": "Task file read at startup and written at shutdown (default: tasks.txt).",
    # Behaviour
    "TODO_AUTOSAVE": "Write the task file after every add/done/delete (true/false, default: false).",
}
