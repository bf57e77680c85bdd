# src/weekrunner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is validated at import time; the calendar validates interval_size
  when it is built.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .availability.day_schedule import TimeStatus
from .availability.intervals import DEFAULT_INTERVAL_MINUTES
from .tasks.bash_task import DEFAULT_SHELL

ENV_PREFIX = "WEEKRUNNER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- Local paths (ignored by git) ----
    data_dir: Path
    log_dir: Path

    # ---- Availability calendar ----
    interval_minutes: int
    default_status: TimeStatus

    # ---- Script tasks ----
    shell: str
    poll_interval: float

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/weekrunner"))

        return Settings(
            app_name=_env(_k("APP_NAME"), "weekrunner") or "weekrunner",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=data_dir,
            log_dir=_env_path(_k("LOG_DIR"), data_dir),
            interval_minutes=_env_int(_k("INTERVAL_MINUTES"), DEFAULT_INTERVAL_MINUTES),
            default_status=TimeStatus.parse(os.getenv(_k("DEFAULT_STATUS"))),
            shell=_env(_k("SHELL"), DEFAULT_SHELL).strip() or DEFAULT_SHELL,
            poll_interval=max(0.01, _env_float(_k("POLL_INTERVAL"), 0.1)),
        )


# Local .env is a convenience; real environment variables win.
load_dotenv(override=False)

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
