"""Logger setup for recoverable warnings.

Warnings go to stderr as one line each, prefixed with the program name.
"""

from __future__ import annotations

import logging
from typing import Final

LOGGER_NAME: Final = "mini_ls"
LOG_FORMAT: Final = "mini-ls: %(levelname)s: %(message)s"


class _LowercaseLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = record.levelname.lower()
        return super().format(record)


def setup_logger(name: str = LOGGER_NAME, level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to ``name`` once and return the logger.

    Repeated calls reuse the existing handler. Child loggers created with
    ``logging.getLogger(__name__)`` inside the package propagate here.
    """
    log: Final = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_LowercaseLevelFormatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(level)
        log.propagate = False
    return log


__all__ = ["LOGGER_NAME", "setup_logger"]
