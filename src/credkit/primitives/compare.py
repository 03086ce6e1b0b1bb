"""Constant-time comparison of secrets."""
from __future__ import annotations

import hmac


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Return ``True`` when *a* and *b* hold the same bytes.

    Inputs of different length compare unequal without inspecting content.
    For equal lengths every byte is examined, whatever the position of the
    first mismatch.
    """
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)


__all__ = ["constant_time_equal"]
