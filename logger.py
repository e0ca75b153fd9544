"""
Logging setup for character-info.

Program output goes to stdout through rich; log records go to stderr so they
never mix with listings a user may pipe elsewhere.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "character_info"
HANDLER_TAG = "_character_info_handler"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger under the character_info namespace.

    Args:
        name: Logger name (typically __name__ of the calling module)
        level: Optional logging level

    Returns:
        Configured logger instance
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)

    root = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, HANDLER_TAG, False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        setattr(handler, HANDLER_TAG, True)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.propagate = False
        if root.level == logging.NOTSET:
            root.setLevel(logging.WARNING)

    if level is not None:
        logger.setLevel(level)

    return logger


def configure_logging(level: int | str) -> None:
    """Set the level for every character_info logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    get_logger(ROOT_LOGGER).setLevel(level)
