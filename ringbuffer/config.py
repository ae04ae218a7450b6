"""Ring buffer configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_FORMATS = {"text", "json"}


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value if value else default


@dataclass(frozen=True, slots=True)
class RingBufferConfig:
    """Immutable ring buffer defaults."""

    default_capacity: int = 1024
    trace_enabled: bool = False
    log_level: str = "INFO"
    log_format: str = "text"  # text|json


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("RINGBUFFER_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


def load_ringbuffer_config() -> RingBufferConfig:
    log_format = _str("RINGBUFFER_LOG_FORMAT", "text").lower()
    if log_format not in _LOG_FORMATS:
        log_format = "text"
    return RingBufferConfig(
        default_capacity=max(1, _int("RINGBUFFER_DEFAULT_CAPACITY", 1024)),
        trace_enabled=_flag("RINGBUFFER_TRACE", False),
        log_level=resolve_log_level_name(),
        log_format=log_format,
    )


__all__ = ["RingBufferConfig", "load_ringbuffer_config", "resolve_log_level_name"]
