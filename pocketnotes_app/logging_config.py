"""Logging configuration for pocketnotes."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

LOGGER_NAME = "pocketnotes_app"


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured output."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    json_output: bool = False,
) -> logging.Logger:
    """Configure logging for pocketnotes.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR).
        log_file: Destination file. ``None`` logs to stderr, which draws over
            the terminal UI, so the CLI passes a file whenever it is configured.
        json_output: If True, use JSON formatter.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()

    handler: logging.Handler = logging.StreamHandler(sys.stderr)
    fallback_error: Optional[OSError] = None
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            fallback_error = exc

    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root.addHandler(handler)
    if fallback_error is not None:
        root.warning("Cannot log to %s (%s), logging to stderr", log_file, fallback_error)
    return root


__all__ = ["JsonFormatter", "setup_logging", "LOGGER_NAME"]
