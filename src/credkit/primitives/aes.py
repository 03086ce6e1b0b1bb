"""AES-CBC encryption with a random IV prepended to the ciphertext.

Wire layout::

    IV (16 bytes) || AES-CBC(key, IV, PKCS7(plaintext))
"""
from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from credkit.kernel.errors import (
    DecryptionError,
    EncryptionError,
    InvalidKeyLengthError,
    PaddingError,
)
from credkit.primitives import pkcs7
from credkit.primitives.rng import RandomSource, generate_bytes

BLOCK_SIZE = 16
KEY_SIZES = frozenset({16, 24, 32})


def _check_key(key: bytes) -> None:
    if len(key) not in KEY_SIZES:
        raise InvalidKeyLengthError(len(key))


def encrypt(key: bytes, plain: bytes, *, random_bytes: RandomSource = generate_bytes) -> bytes:
    """Encrypt *plain* under *key* using a fresh IV drawn from *random_bytes*."""
    _check_key(key)
    try:
        padded = pkcs7.pad(plain, BLOCK_SIZE)
    except PaddingError as exc:
        raise EncryptionError("error when padding message with PKCS7", cause=exc) from exc

    iv = random_bytes(BLOCK_SIZE)
    if len(iv) != BLOCK_SIZE:
        raise EncryptionError(f"random source returned {len(iv)} bytes for a {BLOCK_SIZE}-byte IV")

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return iv + encryptor.update(padded) + encryptor.finalize()


def decrypt(key: bytes, scrambled: bytes) -> bytes:
    """Reverse :func:`encrypt`."""
    _check_key(key)
    body_len = len(scrambled) - BLOCK_SIZE
    if body_len < BLOCK_SIZE or body_len % BLOCK_SIZE:
        raise DecryptionError(f"ciphertext length {len(scrambled)} is not IV plus whole blocks")

    iv, body = scrambled[:BLOCK_SIZE], scrambled[BLOCK_SIZE:]
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(body) + decryptor.finalize()
    try:
        return pkcs7.unpad(padded, BLOCK_SIZE)
    except PaddingError as exc:
        raise DecryptionError("error when un-padding message with PKCS7", cause=exc) from exc


__all__ = ["BLOCK_SIZE", "KEY_SIZES", "decrypt", "encrypt"]
