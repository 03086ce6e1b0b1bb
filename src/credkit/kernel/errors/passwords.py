"""Password errors – strategy resolution and stored-hash parsing."""

from __future__ import annotations

from typing import Any

from credkit.kernel.errors.base import BaseError


class PasswordError(BaseError):
    """Base class for password hashing errors."""

    default_code = "password_error"


class UnsupportedStrategyError(PasswordError):
    """A strategy identifier names an unknown family or carries bad parameters."""

    default_code = "unsupported_strategy"

    def __init__(self, strategy: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"unsupported password hashing strategy {strategy!r}: {reason}",
            detail={"strategy": strategy},
            **kwargs,
        )
        self.strategy = strategy
        self.reason = reason


class InvalidPasswordHashError(PasswordError):
    """A stored password hash string is not ``strategy.salt.hash``."""

    default_code = "invalid_password_hash"


__all__ = ["InvalidPasswordHashError", "PasswordError", "UnsupportedStrategyError"]
