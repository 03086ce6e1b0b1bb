"""Token errors – one opaque failure class for validation, plus kind misuse."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from credkit.kernel.errors.base import BaseError


class InvalidTokenReason(StrEnum):
    """Internal cause of a token rejection.

    Exposed for diagnostics and tests only; never part of the error message.
    """

    EMPTY = "empty"
    MALFORMED = "malformed"
    BAD_ENCODING = "bad_encoding"
    BAD_SIGNATURE = "bad_signature"
    DECRYPTION_FAILED = "decryption_failed"
    MALFORMED_RECORD = "malformed_record"
    KIND_MISMATCH = "kind_mismatch"
    BAD_EXPIRY = "bad_expiry"
    EXPIRED = "expired"
    BAD_PAYLOAD = "bad_payload"


class TokenError(BaseError):
    """Base class for token protocol errors."""

    default_code = "token_error"


class InvalidTokenError(TokenError):
    """The token is missing, invalid or has expired.

    Every validation failure surfaces as this class with the same message and
    code, so callers cannot tell a forged token from an expired one.
    """

    default_code = "invalid_token"
    MESSAGE = "token is missing, invalid or has expired"

    def __init__(self, reason: InvalidTokenReason, **kwargs: Any) -> None:
        super().__init__(self.MESSAGE, **kwargs)
        self.reason = reason


class TokenKindError(TokenError):
    """The token kind cannot be embedded in a plaintext record."""

    default_code = "invalid_token_kind"

    def __init__(self, kind: str, reason: str = "must not contain '.'", **kwargs: Any) -> None:
        super().__init__(f"token kind {reason}: {kind!r}", **kwargs)
        self.kind = kind
        self.reason = reason


class TokenExpiryError(TokenError):
    """The requested lifetime does not yield a representable expiry."""

    default_code = "token_expiry_out_of_range"


__all__ = [
    "InvalidTokenError",
    "InvalidTokenReason",
    "TokenError",
    "TokenExpiryError",
    "TokenKindError",
]
