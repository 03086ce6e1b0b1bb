"""Stored password hash record: ``strategy.base64(salt).base64(hash)``."""
from __future__ import annotations

import dataclasses

from credkit.kernel.errors import InvalidPasswordHashError
from credkit.primitives.encoding import b64std_decode, b64std_encode

SEPARATOR = "."


@dataclasses.dataclass(frozen=True)
class PasswordHash:
    """A salted password hash together with the strategy that produced it.

    ``str(record)`` is the value to persist.
    """

    strategy: str
    salt: bytes = dataclasses.field(repr=False)
    hash: bytes = dataclasses.field(repr=False)

    def __str__(self) -> str:
        return SEPARATOR.join((self.strategy, b64std_encode(self.salt), b64std_encode(self.hash)))

    @classmethod
    def parse(cls, text: str) -> PasswordHash:
        """Decompose a stored hash string.

        Raises:
            InvalidPasswordHashError: not three parts, or salt/hash not base64.
        """
        if not text:
            raise InvalidPasswordHashError("password hash is empty")
        parts = text.split(SEPARATOR)
        if len(parts) != 3:
            raise InvalidPasswordHashError(f"password hash has {len(parts)} parts, expected 3")
        strategy, encoded_salt, encoded_hash = parts
        try:
            salt = b64std_decode(encoded_salt)
            digest = b64std_decode(encoded_hash)
        except ValueError as exc:
            raise InvalidPasswordHashError("password hash salt or hash is not base64", cause=exc) from exc
        return cls(strategy=strategy, salt=salt, hash=digest)


__all__ = ["PasswordHash"]
