"""
File-backed debug logging.

The TUI owns the terminal, so records go to a file instead of stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from menu_browser.config import LOG_LEVEL, LOG_LEVEL_ENV, LOG_PATH, LOG_PATH_ENV

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_log_path() -> Path:
    """
    Resolve the debug log path.

    Resolution order:
    1. MENU_BROWSER_LOG_PATH (if set)
    2. LOG_PATH
    """
    env_override = os.environ.get(LOG_PATH_ENV, "").strip()
    return Path(env_override or LOG_PATH)


def resolve_log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.DEBUG
    return level


def _build_handler() -> logging.Handler:
    log_path = resolve_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    except OSError:
        # Logging must never interfere with app flow.
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_build_handler())
        logger.setLevel(resolve_log_level())
        logger.propagate = False
    return logger
