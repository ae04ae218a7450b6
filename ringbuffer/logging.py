"""Ring buffer loggers and formatters."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import IO

from ringbuffer.config import RingBufferConfig, load_ringbuffer_config
from ringbuffer.json_codec import dumps_text

ROOT_LOGGER_NAME = "ringbuffer"
CURSOR_FIELDS: tuple[str, ...] = ("start", "end", "capacity", "length")

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def get_ringbuffer_logger(name: str) -> logging.Logger:
    """Return a logger under the ``ringbuffer`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _split_extras(record: logging.LogRecord) -> tuple[dict[str, object], dict[str, object]]:
    cursor: dict[str, object] = {}
    fields: dict[str, object] = {}
    for key, value in record.__dict__.items():
        if key in _RECORD_ATTRS:
            continue
        if key in CURSOR_FIELDS:
            cursor[key] = value
        else:
            fields[key] = value
    return cursor, fields


class TextFormatter(logging.Formatter):
    """Plain-text lines with cursor fields appended as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        cursor, _ = _split_extras(record)
        if not cursor:
            return line
        pairs = " ".join(f"{key}={cursor[key]}" for key in CURSOR_FIELDS if key in cursor)
        return f"{line} [{pairs}]"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; cursor snapshots go under ``cursor``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        cursor, fields = _split_extras(record)
        if cursor:
            payload["cursor"] = cursor
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def setup_ringbuffer_logging(
    config: RingBufferConfig | None = None,
    *,
    stream: IO[str] | None = None,
) -> logging.Handler | None:
    """Attach a console handler to the ``ringbuffer`` logger unless one is present.

    Returns the handler that was added, or None when the logger was already
    configured.
    """
    resolved = config if config is not None else load_ringbuffer_config()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if logger.handlers:
        return None
    logger.setLevel(logging.getLevelNamesMapping().get(resolved.log_level, logging.INFO))
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter() if resolved.log_format == "json" else TextFormatter())
    logger.addHandler(handler)
    return handler


__all__ = [
    "CURSOR_FIELDS",
    "JsonFormatter",
    "ROOT_LOGGER_NAME",
    "TextFormatter",
    "get_ringbuffer_logger",
    "setup_ringbuffer_logging",
]
