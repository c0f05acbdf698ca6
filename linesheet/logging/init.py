from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Messages are written to stdout as "<LABEL> <message>" with the labels
INFO, WARN, ERROR and SUMMARY (a custom level between INFO and WARNING used
for the one-line page summary the CLI prints).
"""

__all__ = [
    "setup_logging",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "linesheet"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter producing "LABEL message" lines."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``linesheet`` logger (idempotent).

    Child loggers (``linesheet.ingest.reader`` etc.) propagate here.
    Passing ``debug=True`` lowers the level on an already configured logger.
    """
    global _logger

    level = logging.DEBUG if debug else logging.INFO
    if _logger is None:
        logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(LabeledFormatter())
        _logger = logging.getLogger(LOGGER_NAME)
        _logger.handlers[:] = [handler]
        _logger.propagate = False
    elif not debug:
        return _logger

    _logger.setLevel(level)
    for h in _logger.handlers:
        h.setLevel(level)
    return _logger


def log_summary(message: str) -> None:
    setup_logging().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Drop the stdout handler so the next setup binds the current stream."""
    global _logger
    logging.getLogger(LOGGER_NAME).handlers.clear()
    _logger = None
