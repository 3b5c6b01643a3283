"""Canonical JSON and unpadded base64url encoding of token segments."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Mapping

from .errors import DecodeError, SerializationError


def canonical_json(value: Mapping[str, Any]) -> str:
    """Return compact JSON text, preserving key order."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Cannot serialize segment: {exc}") from exc


def b64url_encode(raw: bytes) -> str:
    """Base64url-encode bytes and strip trailing padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode base64url text, tolerating absent padding."""
    try:
        data = text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise DecodeError("Segment contains non-ASCII characters.") from exc
    data = data.rstrip(b"=")
    if len(data) % 4 == 1:
        raise DecodeError("Invalid base64url segment length.")
    data += b"=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Invalid base64url segment: {exc}") from exc


def encode_segment(value: Mapping[str, Any]) -> str:
    """Serialize a mapping into one token segment."""
    return b64url_encode(canonical_json(value).encode("utf-8"))


def decode_segment(text: str) -> Dict[str, Any]:
    """Parse one token segment back into a mapping.

    Segments that decode to empty text yield an empty mapping.
    """
    raw = b64url_decode(text)
    if not raw:
        return {}
    try:
        value = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"Invalid JSON segment: {exc}") from exc
    if not isinstance(value, dict):
        raise DecodeError(f"Segment must be a JSON object, got {type(value).__name__}.")
    return value
