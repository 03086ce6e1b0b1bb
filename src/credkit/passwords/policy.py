"""Password policy – composable strength rules.

Each rule maps a password to ``(ok, message)``; a :class:`PasswordPolicy`
runs every rule and collects the messages of those that fail.

Example::

    policy = PasswordPolicy(length_check(10), digits_check(2))
    result = policy.check("hunter2")
    if not result:
        raise ValueError("; ".join(result.errors))
"""
from __future__ import annotations

import dataclasses
from typing import Callable

Rule = Callable[[str], tuple[bool, str]]

SPECIAL_CHARACTERS = "!@£$%^&*()_-+={}[]€#:;\"'|\\?/<>,.~`§±"


@dataclasses.dataclass(frozen=True)
class PolicyResult:
    ok: bool
    errors: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.ok


def _count_rule(match: Callable[[str], bool], min_count: int, group: str) -> Rule:
    if min_count > 1:
        group += "s"

    def rule(password: str) -> tuple[bool, str]:
        count = sum(1 for char in password if match(char))
        if count < min_count:
            return False, f"password must have at least {min_count} {group}"
        return True, ""

    return rule


def uppercase_check(min_count: int = 1) -> Rule:
    return _count_rule(str.isupper, min_count, "uppercase letter")


def lowercase_check(min_count: int = 1) -> Rule:
    return _count_rule(str.islower, min_count, "lowercase letter")


def digits_check(min_count: int = 1) -> Rule:
    return _count_rule(str.isdecimal, min_count, "digit")


def special_char_check(min_count: int = 1) -> Rule:
    return _count_rule(SPECIAL_CHARACTERS.__contains__, min_count, "special character")


def length_check(min_length: int) -> Rule:
    """Minimum length in characters."""

    def rule(password: str) -> tuple[bool, str]:
        if len(password) < min_length:
            return False, f"password does not meet the minimum length of {min_length} characters"
        return True, ""

    return rule


class PasswordPolicy:
    def __init__(self, *rules: Rule) -> None:
        self._rules = rules

    def check(self, password: str) -> PolicyResult:
        errors = tuple(message for ok, message in (rule(password) for rule in self._rules) if not ok)
        return PolicyResult(ok=not errors, errors=errors)


DEFAULT_POLICY = PasswordPolicy(
    length_check(8),
    uppercase_check(1),
    lowercase_check(1),
    digits_check(1),
    special_char_check(1),
)

__all__ = [
    "DEFAULT_POLICY",
    "SPECIAL_CHARACTERS",
    "PasswordPolicy",
    "PolicyResult",
    "Rule",
    "digits_check",
    "length_check",
    "lowercase_check",
    "special_char_check",
    "uppercase_check",
]
