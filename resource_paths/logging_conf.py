"""JSON-line logging for resource_paths.

The library itself only emits records under the "resource_paths" logger and
never configures handlers on import. Applications and tests that want the
one-object-per-line output call setup_logging(); it is idempotent.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import IO, Any

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)

logging.getLogger("resource_paths").addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """A minimal JSON formatter.

    - Produces one JSON object per line.
    - Includes ts, level, logger, message and any structured extras passed via
      `logger.debug("path.extract", extra={...})`.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
        }

        if isinstance(record.msg, dict):
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()

        # Structured extras never replace ts/level/logger/message.
        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        for key, value in extras.items():
            payload.setdefault(key, value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_stream_handler(level: int, stream: IO[str] | None = None) -> Handler:
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    return handler


def setup_logging(level: str | int = _DEFAULT_LEVEL, *, stream: IO[str] | None = None) -> None:
    """Attach a JSON handler to the root logger.

    Idempotent: only attaches a handler if the root logger has none.
    """
    root = logging.getLogger()

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if root.handlers:
        return

    root.setLevel(level)
    root.addHandler(_make_stream_handler(level, stream))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger.

    Usage: logger = get_logger("resource_paths.paths")
    """
    return logging.getLogger(name if name else "resource_paths")
