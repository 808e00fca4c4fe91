# logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from config import Settings, get_settings

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _OwnLogsFilter(logging.Filter):
    """Keep tracker logs; let third-party loggers (sqlalchemy etc.) through only at WARNING+."""

    PREFIXES = ("models", "utils", "db", "config", "__main__")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".", 1)[0] in self.PREFIXES:
            return True
        return record.levelno >= logging.WARNING


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure root logging once, at process start:
    - console handler at the configured level, filtered
    - optional file handler with everything (DEBUG)
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(settings.log_level_value)
    ch.setFormatter(fmt)
    ch.addFilter(_OwnLogsFilter())
    root.addHandler(ch)

    if settings.log_file is not None:
        log_file = Path(settings.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
