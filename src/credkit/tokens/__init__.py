"""Tokens – signed, encrypted, expiring, kind-bound opaque tokens."""
from credkit.tokens.generator import TokenGenerator
from credkit.tokens.kinds import TokenKind
from credkit.tokens.validator import TokenValidator

__all__ = ["TokenGenerator", "TokenKind", "TokenValidator"]
