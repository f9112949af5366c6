"""Logging setup for the ``rag_pipeline`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging`` is
called once by the API factory or a CLI command to attach handlers.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "rag_pipeline"

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, with exception details when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": None if exc_value is None else str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonLogFormatter()
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Attach stdout (and optionally file) handlers to the package logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Also write to this file, creating parent directories.
        json_format: Emit JSON lines instead of the pipe-delimited format.
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.handlers.clear()

    formatter = _make_formatter(json_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or its child ``rag_pipeline.<name>``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}" if name else ROOT_LOGGER_NAME)
