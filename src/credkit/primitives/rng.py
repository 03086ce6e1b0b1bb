"""Cryptographically secure random bytes."""
from __future__ import annotations

import secrets
from typing import Callable

from credkit.kernel.errors import RandomSourceError

RandomSource = Callable[[int], bytes]


def generate_bytes(length: int) -> bytes:
    """Return *length* random bytes from the OS CSPRNG.

    Raises :class:`RandomSourceError` if the entropy source fails; callers
    must not retry.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    try:
        return secrets.token_bytes(length)
    except OSError as exc:
        raise RandomSourceError(f"failed to generate {length} random bytes", cause=exc) from exc


__all__ = ["RandomSource", "generate_bytes"]
