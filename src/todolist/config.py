"""Settings loaded from environment variables (+ optional .env).

One frozen Settings object for the whole app. Command-line options
override these values in main.py.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_TASKS_FILE = Path("tasks.txt")
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def _env_path(name: str, default: Path) -> Path:
    return _env_optional_path(name) or default


def _env_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: str
    log_file: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)
        return Settings(
            tasks_file=_env_path(_k("FILE"), DEFAULT_TASKS_FILE),
            log_level=_env_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
            log_file=_env_optional_path(_k("LOG_FILE")),
        )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
