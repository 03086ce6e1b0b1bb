"""Primitives – building blocks for the token and password protocols.

Each module has a fixed, bit-exact contract::

    compare   constant-time byte comparison
    rng       CSPRNG byte generation
    pkcs7     PKCS7 pad / unpad
    aes       AES-CBC with a random IV prefix
    sig       HMAC signatures
    base62    compact integer encoding used in strategy identifiers
    encoding  strict base64 helpers
"""
from credkit.primitives import aes, base62, compare, encoding, pkcs7, rng, sig

__all__ = ["aes", "base62", "compare", "encoding", "pkcs7", "rng", "sig"]
