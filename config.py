# config.py

"""Settings for the tracker, read from environment variables.

Only the persistence adapter and logging setup read these; the statistics
engine takes everything it needs as arguments, so callers pass `week_start`
to the week views themselves.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TRACKER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///tracker.db"
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    week_start: int = 0  # 0 = Monday, as in date.weekday()

    @property
    def log_level_value(self) -> int:
        level = getattr(logging, self.log_level.upper(), None)
        return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    week_start = _env_int(_k("WEEK_START"), 0)
    if not 0 <= week_start <= 6:
        week_start = 0
    return Settings(
        database_url=_env("DATABASE_URL", "sqlite:///tracker.db"),
        log_level=_env(_k("LOG_LEVEL"), "INFO"),
        log_file=_env_path(_k("LOG_FILE")),
        week_start=week_start,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
