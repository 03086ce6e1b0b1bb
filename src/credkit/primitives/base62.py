"""Base-62 integer encoding (``0-9A-Za-z``, most significant digit first)."""
from __future__ import annotations

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_BASE = len(ALPHABET)
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def encode(number: int) -> str:
    if number < 0:
        raise ValueError(f"base62 cannot encode negative numbers: {number}")
    if number == 0:
        return ALPHABET[0]
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, _BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode(text: str) -> int:
    if not text:
        raise ValueError("base62 input is empty")
    number = 0
    for char in text:
        try:
            number = number * _BASE + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base62 character {char!r}") from None
    return number


__all__ = ["ALPHABET", "decode", "encode"]
