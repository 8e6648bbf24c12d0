"""
Logging helpers shared by the c-hash modules.

Library modules only fetch loggers under the "chash" namespace and emit
records; handlers are attached by the application (the chash CLI calls
setup_logging). The level comes from CHASH_LOG_LEVEL unless set explicitly.
"""

import logging
import os
from typing import Optional

from chash.config import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL_ENV

_root_logger = logging.getLogger("chash")
_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Give the chash logger a stderr handler (only once) and set its level."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        _root_logger.addHandler(handler)

    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    if level_name not in _LEVELS:
        level_name = DEFAULT_LOG_LEVEL
    _root_logger.setLevel(level_name)
    return _root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger, e.g. get_logger("codec") -> "chash.codec"."""
    return _root_logger.getChild(name)


def log(logger: logging.Logger, level: str, message: str, **context):
    """Emit message with key=value context appended after " | "."""
    levelno = logging.getLevelName(level.upper())
    if not isinstance(levelno, int):
        levelno = logging.INFO
    if not logger.isEnabledFor(levelno):
        return
    if context:
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        logger.log(levelno, "%s | %s", message, pairs)
    else:
        logger.log(levelno, message)
