"""Plaintext token record codec.

Layout::

    kind "." base64url(payload) "." RFC3339(expiry)

The payload is base64url-encoded before joining, so only ``kind`` could ever
contain the separator; the generator refuses such kinds.
"""
from __future__ import annotations

import re
from datetime import datetime

from credkit.kernel.time import to_utc
from credkit.primitives.encoding import b64url_encode

SEPARATOR = "."

_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def format_expiry(moment: datetime) -> str:
    """Render *moment* as second-precision RFC 3339 in UTC (``...Z``)."""
    utc = to_utc(moment).replace(microsecond=0)
    return utc.isoformat().replace("+00:00", "Z")


def parse_expiry(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; the offset is mandatory."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    fraction = match.group(1)
    if fraction is not None:
        # datetime only resolves microseconds
        text = text.replace(f".{fraction}", f".{fraction[:6].ljust(6, '0')}", 1)
    return to_utc(datetime.fromisoformat(text.upper()))


def format_record(kind: str, payload: bytes, expiry: datetime) -> str:
    return SEPARATOR.join((kind, b64url_encode(payload), format_expiry(expiry)))


def split_record(plain: bytes) -> tuple[str, str, str]:
    """Split a decrypted record into ``(kind, encoded_payload, expiry)``."""
    parts = plain.decode("utf-8").split(SEPARATOR, 2)
    if len(parts) != 3:
        raise ValueError(f"token record has {len(parts)} parts, expected 3")
    kind, encoded_payload, expiry = parts
    return kind, encoded_payload, expiry


__all__ = ["SEPARATOR", "format_expiry", "format_record", "parse_expiry", "split_record"]
