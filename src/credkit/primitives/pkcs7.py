"""PKCS7 padding for arbitrary block sizes between 1 and 255 bytes."""
from __future__ import annotations

from cryptography.hazmat.primitives import padding

from credkit.kernel.errors import PaddingError

MAX_BLOCK_SIZE = 255


def _padding(block_size: int) -> padding.PKCS7:
    if not 1 <= block_size <= MAX_BLOCK_SIZE:
        raise PaddingError(f"pkcs7: invalid block size {block_size}")
    return padding.PKCS7(block_size * 8)


def pad(data: bytes, block_size: int) -> bytes:
    """Append between 1 and *block_size* padding bytes.

    Block-aligned input still receives a full block of padding.
    """
    padder = _padding(block_size).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes, block_size: int) -> bytes:
    """Strip PKCS7 padding, checking every padding byte."""
    scheme = _padding(block_size)
    if not data or len(data) % block_size:
        raise PaddingError(f"pkcs7: invalid data length {len(data)}")
    unpadder = scheme.unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError as exc:
        raise PaddingError("pkcs7: invalid padding", cause=exc) from exc


__all__ = ["MAX_BLOCK_SIZE", "pad", "unpad"]
