"""Token validation – verify, decrypt, then check kind and expiry.

The signature is checked before any decryption work. Every failure raises
:class:`~credkit.kernel.errors.InvalidTokenError` with the same message; the
internal cause is kept on ``InvalidTokenError.reason`` and logged at debug
level only.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from credkit.kernel.errors import CryptoError, InvalidKeyLengthError, InvalidTokenError, InvalidTokenReason
from credkit.kernel.time import Clock, SystemClock, to_utc
from credkit.observability.logging import get_logger
from credkit.primitives import aes, sig
from credkit.primitives.encoding import b64url_decode
from credkit.tokens.record import SEPARATOR, parse_expiry, split_record

if TYPE_CHECKING:
    from credkit.config import SecuritySettings

_log = get_logger(__name__)


class TokenValidator:
    """Validates and decrypts tokens produced by :class:`~credkit.tokens.TokenGenerator`.

    Raises:
        InvalidKeyLengthError: *encryption_key* is not 16, 24 or 32 bytes long.
    """

    def __init__(
        self,
        encryption_key: bytes,
        signing_key: bytes,
        *,
        clock: Clock | None = None,
    ) -> None:
        if encryption_key is None:
            raise ValueError("encryption_key cannot be None")
        if signing_key is None:
            raise ValueError("signing_key cannot be None")
        if len(encryption_key) not in aes.KEY_SIZES:
            raise InvalidKeyLengthError(len(encryption_key))
        self._encryption_key = bytes(encryption_key)
        self._signing_key = bytes(signing_key)
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(cls, settings: SecuritySettings, *, clock: Clock | None = None) -> TokenValidator:
        return cls(settings.encryption_key_bytes, settings.signing_key_bytes, clock=clock)

    def validate(self, expected_kind: str, token: str) -> bytes:
        """Return the payload of *token* if it is authentic, of *expected_kind* and unexpired.

        Raises:
            InvalidTokenError: for every kind of failure.
        """
        if not token or not isinstance(token, str):
            raise self._reject(InvalidTokenReason.EMPTY)

        parts = token.split(SEPARATOR, 1)
        if len(parts) != 2:
            raise self._reject(InvalidTokenReason.MALFORMED)

        try:
            signature = b64url_decode(parts[0])
            cipher = b64url_decode(parts[1])
        except ValueError:
            raise self._reject(InvalidTokenReason.BAD_ENCODING) from None

        if not sig.validate_sha256(self._signing_key, cipher, signature):
            raise self._reject(InvalidTokenReason.BAD_SIGNATURE)

        try:
            plain = aes.decrypt(self._encryption_key, cipher)
        except CryptoError:
            raise self._reject(InvalidTokenReason.DECRYPTION_FAILED) from None

        try:
            kind, encoded_payload, raw_expiry = split_record(plain)
        except ValueError:
            raise self._reject(InvalidTokenReason.MALFORMED_RECORD) from None

        # A session token must never pass as a password reset token.
        if kind != expected_kind:
            raise self._reject(InvalidTokenReason.KIND_MISMATCH)

        try:
            expiry = parse_expiry(raw_expiry)
        except ValueError:
            raise self._reject(InvalidTokenReason.BAD_EXPIRY) from None

        if to_utc(self._clock.now()) > expiry:
            raise self._reject(InvalidTokenReason.EXPIRED)

        try:
            return b64url_decode(encoded_payload)
        except ValueError:
            raise self._reject(InvalidTokenReason.BAD_PAYLOAD) from None

    @staticmethod
    def _reject(reason: InvalidTokenReason) -> InvalidTokenError:
        _log.debug("token.rejected", reason=reason.value)
        return InvalidTokenError(reason)


__all__ = ["TokenValidator"]
