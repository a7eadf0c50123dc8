# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every setting has a default; the app runs with an empty environment.
- Module-level constants are exported for quick access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    log_dir: Path
    tasks_path: Path

    # ---- Behaviour ----
    autosave: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        # The task file lives in the working directory by convention.
        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.txt"))

        autosave = _env_bool(_k("AUTOSAVE"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_dir=log_dir,
            tasks_path=tasks_path,
            autosave=autosave,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for a couple of explicit overrides.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    if hasattr(_config_local, "TASKS_PATH"):
        object.__setattr__(SETTINGS, "tasks_path", Path(_config_local.TASKS_PATH).expanduser())  # type: ignore[misc]
    if hasattr(_config_local, "AUTOSAVE"):
        object.__setattr__(SETTINGS, "autosave", bool(_config_local.AUTOSAVE))  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS


# --------------------------------------------------------------------------------------
# Module-level constants.
# --------------------------------------------------------------------------------------

APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

DATA_DIR = SETTINGS.data_dir
LOG_DIR = SETTINGS.log_dir
TASKS_PATH = SETTINGS.tasks_path

AUTOSAVE = SETTINGS.autosave
