"""envlens logging configuration.

envlens owns the terminal while it runs, so log records must never be written
straight to stdout or stderr. `setup_logging` routes the `envlens` logger
through Textual's handler: records go to the Textual devtools console
(`textual console`) while the app is active, and to stderr before startup and
after shutdown.
"""

from __future__ import annotations

import logging
from typing import Optional

from textual.logging import TextualHandler

from envlens.constants import APP_NAME, DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure envlens logging.

    Args:
        level: Optional level name; defaults to WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(APP_NAME)
    resolved = logging.getLevelName((level or DEFAULT_LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(resolved)

    if not any(isinstance(handler, TextualHandler) for handler in logger.handlers):
        handler = TextualHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
