"""HMAC signatures."""
from __future__ import annotations

import hashlib
import hmac
from typing import Any, Callable

from credkit.primitives.compare import constant_time_equal

DigestFactory = Callable[[], Any]


def compute(digest: DigestFactory, key: bytes, msg: bytes) -> bytes:
    """Return the HMAC of *msg* under *key* using *digest* (e.g. ``hashlib.sha256``)."""
    return hmac.new(key, msg, digest).digest()


def validate(digest: DigestFactory, key: bytes, msg: bytes, signature: bytes) -> bool:
    """Recompute the HMAC and compare it to *signature* in constant time."""
    return constant_time_equal(signature, compute(digest, key, msg))


def compute_sha256(key: bytes, msg: bytes) -> bytes:
    return compute(hashlib.sha256, key, msg)


def validate_sha256(key: bytes, msg: bytes, signature: bytes) -> bool:
    return validate(hashlib.sha256, key, msg, signature)


__all__ = ["DigestFactory", "compute", "compute_sha256", "validate", "validate_sha256"]
