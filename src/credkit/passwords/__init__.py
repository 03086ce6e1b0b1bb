"""Passwords – versioned, self-describing, upgradable password hashes."""
from credkit.passwords.hasher import DEFAULT_SALT_LENGTH, PasswordHasher
from credkit.passwords.policy import (
    DEFAULT_POLICY,
    PasswordPolicy,
    PolicyResult,
    digits_check,
    length_check,
    lowercase_check,
    special_char_check,
    uppercase_check,
)
from credkit.passwords.record import PasswordHash
from credkit.passwords.strategy import (
    DEFAULT_STRATEGY,
    KdfFamily,
    KeyDerivationStrategy,
    Pbkdf2Strategy,
    StrategyLimits,
    StrategyRegistry,
    default_registry,
)
from credkit.passwords.validator import PasswordCheck, PasswordValidator

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_SALT_LENGTH",
    "DEFAULT_STRATEGY",
    "KdfFamily",
    "KeyDerivationStrategy",
    "PasswordCheck",
    "PasswordHash",
    "PasswordHasher",
    "PasswordPolicy",
    "PasswordValidator",
    "Pbkdf2Strategy",
    "PolicyResult",
    "StrategyLimits",
    "StrategyRegistry",
    "default_registry",
    "digits_check",
    "length_check",
    "lowercase_check",
    "special_char_check",
    "uppercase_check",
]
