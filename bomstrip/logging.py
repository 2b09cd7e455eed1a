"""Structured JSON logging for the bomstrip command."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ROOT_LOGGER = "bomstrip"

LEVELS: Mapping[str, int] = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def __init__(self, correlation_id: str) -> None:
        super().__init__()
        self._correlation_id = correlation_id

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "event": record.getMessage(),
            "correlation_id": self._correlation_id,
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, Mapping):
            payload.update(fields)
        return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def configure_logging(level: int, *, correlation_id: str, stream: TextIO | None = None) -> None:
    """Install the JSON handler on the package logger.

    Called once by the CLI before any file is touched.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter(correlation_id))
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.handlers = [handler]


class EventLogger:
    """Thin facade logging an event name with keyword fields."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        safe_fields = {key: _jsonable(value) for key, value in fields.items() if value is not None}
        self._logger.log(level, event, extra={"fields": safe_fields})

    def trace(self, event: str, **fields: Any) -> None:
        self._log(TRACE, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, **fields)

    def critical(self, event: str, **fields: Any) -> None:
        self._log(logging.CRITICAL, event, **fields)


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def get_logger(name: str) -> EventLogger:
    return EventLogger(logging.getLogger(name))


__all__ = ["LEVELS", "ROOT_LOGGER", "TRACE", "EventLogger", "JsonFormatter", "configure_logging", "get_logger"]
