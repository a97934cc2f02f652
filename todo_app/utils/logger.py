"""
Logging Utility for the todo MCP server.

Every record under the ``todo_app`` logger is written to stdout as one JSON
document. Modules either use ``logging.getLogger(__name__)`` or wrap it in a
StructuredLogger to attach keyword fields to a record.
"""

import logging
import sys
from datetime import datetime, timezone
import json

ROOT_LOGGER = "todo_app"


class JsonFormatter(logging.Formatter):
    """Render a record, plus any structured fields, as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "fields", {}))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def configure_logging(level="INFO") -> logging.Logger:
    """
    Attach the JSON handler to the package logger and set its level.

    Child loggers inherit the level, so this is the only place LOG_LEVEL
    is applied.

    Args:
        level: Level name or number

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
        root.propagate = False

    root.setLevel(level)
    return root


class StructuredLogger:
    """Thin wrapper passing keyword arguments through as record fields."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info=False, **fields):
        self.logger.log(level, message, exc_info=exc_info, extra={"fields": fields})

    def debug(self, message: str, **fields):
        self._log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields):
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self._log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields):
        self._log(logging.ERROR, message, **fields)

    def critical(self, message: str, **fields):
        self._log(logging.CRITICAL, message, **fields)

    def exception(self, message: str, **fields):
        """Log at ERROR with the active traceback."""
        self._log(logging.ERROR, message, exc_info=True, **fields)


def get_logger(name: str = ROOT_LOGGER) -> StructuredLogger:
    """Get a structured logger; names should sit under ``todo_app``."""
    return StructuredLogger(name)
