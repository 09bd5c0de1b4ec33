"""Logging for actionselect.

Records are tagged with the prompt component that emitted them (``[select]``,
``[config]``, ``[cli]``) and carry their details as ``extra`` fields. The
console shows warnings unless ``ACTIONSELECT_LOG_LEVEL`` says otherwise;
``enable_file_logging`` adds a debug-level file with the fields as JSON.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


LOGGER_NAME = "actionselect"
LOG_LEVEL_ENV = "ACTIONSELECT_LOG_LEVEL"

_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

_file_handler: Optional[logging.FileHandler] = None


class StructuredFormatter(logging.Formatter):
    """``<utc time> [LEVEL] [component] message | {fields}``."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return timestamp.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not fields:
            return message
        return f"{message} | {json.dumps(fields, sort_keys=True, default=str)}"


def console_level() -> int:
    """Console threshold from ``ACTIONSELECT_LOG_LEVEL``; unknown names mean WARNING."""
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not getattr(logger, "_actionselect_configured", False):
        # The file handler takes debug records; the console filters on its own level.
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(console_level())
        console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console)
        logger._actionselect_configured = True  # type: ignore[attr-defined]
    return logger


class SelectLogger:
    """Logger for one prompt component.

    ``logger.debug("Prompt created", active=2)`` emits ``[select] Prompt created``
    with ``active`` as an extra field.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        self.logger = _package_logger()

    def _log(self, level: int, message: str, args: tuple, fields: dict) -> None:
        if self.logger.isEnabledFor(level):
            self.logger.log(level, f"[{self.component}] {message}", *args, extra=fields or None)

    def debug(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, message, args, fields)

    def info(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(logging.INFO, message, args, fields)

    def warning(self, message: str, *args: Any, **fields: Any) -> None:
        self._log(logging.WARNING, message, args, fields)


def get_logger(component: str) -> SelectLogger:
    return SelectLogger(component)


def enable_file_logging(log_file: Path) -> Path:
    """Also write debug records to ``log_file``, replacing any earlier log file."""
    global _file_handler
    log_file = Path(log_file)
    logger = _package_logger()

    if _file_handler is not None:
        if _file_handler.baseFilename == os.path.abspath(log_file):
            return log_file
        logger.removeHandler(_file_handler)
        _file_handler.close()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(StructuredFormatter("%(asctime)s [%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    _file_handler = handler

    get_logger("logging").debug("File logging enabled", path=str(log_file))
    return log_file


def disable_file_logging() -> None:
    """Detach and close the log file opened by :func:`enable_file_logging`."""
    global _file_handler
    if _file_handler is None:
        return
    _package_logger().removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None


__all__ = [
    "LOGGER_NAME",
    "SelectLogger",
    "StructuredFormatter",
    "console_level",
    "disable_file_logging",
    "enable_file_logging",
    "get_logger",
]
