"""Logging configuration.

The terminal is in raw alternate-screen mode while the loop runs, so log
records go to a file in the platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "modaltui"
LOG_LEVEL_ENV_VAR = "MODALTUI_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (argument, then ``$MODALTUI_LOG_LEVEL``) to a number."""
    name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO").strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {name!r}")
    return value


def setup_logging(level: str | None = None, path: Path | None = None) -> Path:
    """Attach a file handler to the ``modaltui`` logger and return its path."""
    log_path = path if path is not None else DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(APP_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(resolve_log_level(level))
    logger.propagate = False
    return log_path
