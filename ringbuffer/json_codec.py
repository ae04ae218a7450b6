"""orjson helpers for structured log payloads."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_bytes(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = 0
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    # Log extras can carry arbitrary objects; fall back to their repr.
    return orjson.dumps(payload, default=repr, option=options)


def dumps_text(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
