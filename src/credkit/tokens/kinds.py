"""Token kinds – purpose tags bound into every token."""
from __future__ import annotations

from enum import StrEnum


class TokenKind(StrEnum):
    """Common token purposes.

    Any ``str`` without a ``.`` works as a kind; this enum keeps the set of
    purposes an application mints closed and typo-free.
    """

    SESSION = "session"
    PASSWORD_RESET = "password-reset"
    EMAIL_VERIFICATION = "email-verification"
    INVITATION = "invitation"


__all__ = ["TokenKind"]
