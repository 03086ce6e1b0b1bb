"""Config settings – SecuritySettings for tokens and password hashing.

Environment variables (prefix ``CREDKIT_``)::

    CREDKIT_TOKEN_ENCRYPTION_KEY    hex, 16/24/32 bytes        (required)
    CREDKIT_TOKEN_SIGNING_KEY       hex, non-empty             (required)
    CREDKIT_PASSWORD_STRATEGY       strategy identifier        (pbkdf2/hmacsha256/12/G8)
    CREDKIT_PASSWORD_SALT_LENGTH    bytes                      (32)
    CREDKIT_MAX_PBKDF2_ITERATIONS   validation upper bound     (10000000)
    CREDKIT_MAX_KEY_LENGTH          validation upper bound     (1024)
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from credkit.config.settings.base import Settings, secret_field
from credkit.config.validation import InvalidSettingValueError
from credkit.kernel.errors import UnsupportedStrategyError
from credkit.passwords.hasher import DEFAULT_SALT_LENGTH
from credkit.passwords.strategy import (
    DEFAULT_STRATEGY,
    StrategyLimits,
    StrategyRegistry,
    default_registry,
)
from credkit.primitives.aes import KEY_SIZES


@dataclasses.dataclass(repr=False)
class SecuritySettings(Settings):
    _prefix: ClassVar[str] = "CREDKIT"

    token_encryption_key: str = secret_field()
    token_signing_key: str = secret_field()
    password_strategy: str = DEFAULT_STRATEGY
    password_salt_length: int = DEFAULT_SALT_LENGTH
    max_pbkdf2_iterations: int = StrategyLimits.max_iterations
    max_key_length: int = StrategyLimits.max_key_length

    def _validate(self) -> None:
        encryption_key = _hex_key("token_encryption_key", self.token_encryption_key)
        if len(encryption_key) not in KEY_SIZES:
            raise InvalidSettingValueError(
                "token_encryption_key",
                self.token_encryption_key,
                f"must decode to 16, 24 or 32 bytes, got {len(encryption_key)}",
                secret=True,
            )
        if not _hex_key("token_signing_key", self.token_signing_key):
            raise InvalidSettingValueError("token_signing_key", self.token_signing_key, "must not be empty", secret=True)
        if self.password_salt_length < 1:
            raise InvalidSettingValueError("password_salt_length", self.password_salt_length, "must be positive")
        if self.max_pbkdf2_iterations < 1 or self.max_key_length < 1:
            raise InvalidSettingValueError(
                "max_pbkdf2_iterations/max_key_length",
                (self.max_pbkdf2_iterations, self.max_key_length),
                "must be positive",
            )
        try:
            self.strategy_registry().resolve(self.password_strategy)
        except UnsupportedStrategyError as exc:
            raise InvalidSettingValueError("password_strategy", self.password_strategy, exc.reason) from exc

    @property
    def encryption_key_bytes(self) -> bytes:
        return bytes.fromhex(self.token_encryption_key)

    @property
    def signing_key_bytes(self) -> bytes:
        return bytes.fromhex(self.token_signing_key)

    def strategy_limits(self) -> StrategyLimits:
        return StrategyLimits(max_iterations=self.max_pbkdf2_iterations, max_key_length=self.max_key_length)

    def strategy_registry(self) -> StrategyRegistry:
        return default_registry(self.strategy_limits())


def _hex_key(name: str, value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        raise InvalidSettingValueError(name, value, "must be hex encoded", secret=True) from exc


__all__ = ["SecuritySettings"]
