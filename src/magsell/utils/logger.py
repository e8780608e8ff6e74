"""
Centralized logging helpers.
All modules should use `get_logger(__name__)` to obtain a logger instance.
Library code never configures handlers; entry points call `setup_logging()`.
"""

import logging
import sys

from ..config import LOG_FORMAT, LOG_DATE_FORMAT

_initialized = False


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logger once.

    Args:
        level: Logging level for the root logger
    """
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger.
    """
    return logging.getLogger(name)
