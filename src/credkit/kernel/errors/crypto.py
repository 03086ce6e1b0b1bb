"""Crypto errors – failures raised by the primitive layer."""

from __future__ import annotations

from typing import Any

from credkit.kernel.errors.base import BaseError


class CryptoError(BaseError):
    """A cryptographic primitive could not complete."""

    default_code = "crypto_error"


class EncryptionError(CryptoError):
    """Encryption failed; indicates caller misconfiguration, not hostile input."""

    default_code = "encryption_error"


class InvalidKeyLengthError(EncryptionError):
    """AES key is not 16, 24 or 32 bytes long."""

    default_code = "invalid_key_length"

    def __init__(self, key_length: int, **kwargs: Any) -> None:
        super().__init__(
            f"encryption key must be either 16, 24 or 32 bytes long, got {key_length}",
            detail={"key_length": key_length},
            **kwargs,
        )
        self.key_length = key_length


class DecryptionError(CryptoError):
    """Ciphertext could not be decrypted (bad length, key or padding)."""

    default_code = "decryption_error"


class PaddingError(CryptoError):
    """PKCS7 padding could not be applied or removed."""

    default_code = "padding_error"


class RandomSourceError(CryptoError):
    """The operating system CSPRNG failed. Treated as fatal."""

    default_code = "random_source_error"


__all__ = [
    "CryptoError",
    "DecryptionError",
    "EncryptionError",
    "InvalidKeyLengthError",
    "PaddingError",
    "RandomSourceError",
]
