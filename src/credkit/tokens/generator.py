"""Token generation – encrypt-then-sign.

Wire format::

    base64url(HMAC-SHA256(signing_key, iv || ct)) "." base64url(iv || ct)

where ``iv || ct`` is the AES-CBC encryption of the plaintext record (see
:mod:`credkit.tokens.record`). Both segments use the unpadded URL-safe alphabet.
"""
from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from credkit.kernel.errors import EncryptionError, TokenExpiryError, TokenKindError
from credkit.kernel.time import Clock, SystemClock, to_utc
from credkit.observability.logging import get_logger
from credkit.primitives import aes, sig
from credkit.primitives.encoding import b64url_encode
from credkit.primitives.rng import RandomSource, generate_bytes
from credkit.tokens.record import SEPARATOR, format_record

if TYPE_CHECKING:
    from credkit.config import SecuritySettings

_log = get_logger(__name__)


class TokenGenerator:
    """Generates signed and encrypted tokens with a fixed expiry.

    Instances hold only their keys, clock and random source, and may be shared
    between threads.

    Args:
        encryption_key: AES key (16, 24 or 32 bytes). The length is checked on
            every :meth:`generate` call and reported as
            :class:`~credkit.kernel.errors.InvalidKeyLengthError`.
        signing_key: HMAC-SHA256 key.
        clock: Source of the current time; defaults to :class:`SystemClock`.
        random_bytes: IV source; defaults to the OS CSPRNG.
    """

    def __init__(
        self,
        encryption_key: bytes,
        signing_key: bytes,
        *,
        clock: Clock | None = None,
        random_bytes: RandomSource = generate_bytes,
    ) -> None:
        if encryption_key is None:
            raise ValueError("encryption_key cannot be None")
        if signing_key is None:
            raise ValueError("signing_key cannot be None")
        self._encryption_key = bytes(encryption_key)
        self._signing_key = bytes(signing_key)
        self._clock = clock or SystemClock()
        self._random_bytes = random_bytes

    @classmethod
    def from_settings(cls, settings: SecuritySettings, *, clock: Clock | None = None) -> TokenGenerator:
        return cls(settings.encryption_key_bytes, settings.signing_key_bytes, clock=clock)

    def generate(self, kind: str, payload: bytes, ttl: timedelta) -> str:
        """Mint a token of *kind* carrying *payload* that expires after *ttl*.

        Raises:
            TokenKindError: *kind* contains the record separator or is not
                encodable as UTF-8.
            TokenExpiryError: *ttl* moves the expiry outside the supported
                date range.
            EncryptionError: the encryption key is invalid or encryption failed.
        """
        if SEPARATOR in kind:
            raise TokenKindError(kind)
        try:
            kind.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise TokenKindError(kind, "is not valid UTF-8", cause=exc) from exc

        try:
            expiry = to_utc(self._clock.now()) + ttl
        except OverflowError as exc:
            raise TokenExpiryError(
                f"token expiry out of range for ttl {ttl}", detail={"ttl_seconds": ttl.total_seconds()}, cause=exc
            ) from exc
        plain = format_record(kind, payload, expiry)

        try:
            cipher = aes.encrypt(self._encryption_key, plain.encode("utf-8"), random_bytes=self._random_bytes)
        except EncryptionError as exc:
            _log.warning("token.generation_failed", kind=kind, code=exc.code)
            raise

        signature = sig.compute_sha256(self._signing_key, cipher)
        _log.debug("token.generated", kind=kind, expiry=expiry.isoformat())
        return f"{b64url_encode(signature)}{SEPARATOR}{b64url_encode(cipher)}"


__all__ = ["TokenGenerator"]
