"""Strict base64 helpers.

Tokens use the URL-safe alphabet without padding; password hashes use the
standard, padded alphabet. Decoding is strict in both cases so that each
byte string has exactly one accepted textual form.
"""
from __future__ import annotations

import base64
import re

_B64URL_CHARS = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url, rejecting padding and non-canonical trailing bits."""
    if not _B64URL_CHARS.fullmatch(text) or len(text) % 4 == 1:
        raise ValueError("invalid base64url input")
    data = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    if b64url_encode(data) != text:
        raise ValueError("non-canonical base64url input")
    return data


def b64std_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64std_decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as exc:
        raise ValueError("invalid base64 input") from exc


__all__ = ["b64std_decode", "b64std_encode", "b64url_decode", "b64url_encode"]
