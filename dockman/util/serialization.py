"""JSON serialisation helpers and lenient conversions to bytes."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import SplitResult, urlsplit

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def deserialize(data: bytes | str) -> Any:
    """Decode a JSON document; raises ValueError on malformed input."""
    return json.loads(data)


def serialize(data: Any) -> bytes:
    """Encode ``data`` as compact JSON with sorted keys and HTML-safe escapes.

    Raises TypeError or ValueError when the value cannot be encoded.
    """
    text = json.dumps(
        data,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=True,
    )
    for char, escaped in _ESCAPES:
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def serialize_or_empty(data: Any) -> bytes:
    """Encode ``data`` as JSON, or return empty bytes if that fails."""
    try:
        return serialize(data)
    except (TypeError, ValueError):
        return b""


def must_serialize(data: Any) -> bytes:
    """Turn any value into bytes.

    Bytes pass through, a list of strings is comma-joined, a string is
    encoded, anything else is JSON-encoded, falling back to its string form.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return ",".join(data).encode("utf-8")
    try:
        return serialize(data)
    except (TypeError, ValueError):
        return f"{data}".encode("utf-8")


def must_url(raw: str) -> SplitResult:
    """Parse a URL, raising ValueError if it is malformed."""
    parts = urlsplit(raw)
    # Accessing the port validates it.
    _ = parts.port
    return parts