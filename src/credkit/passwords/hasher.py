"""Password hashing under the configured strategy."""
from __future__ import annotations

from typing import TYPE_CHECKING

from credkit.observability.logging import get_logger
from credkit.passwords.record import PasswordHash
from credkit.passwords.strategy import DEFAULT_STRATEGY, StrategyRegistry, default_registry
from credkit.primitives.rng import RandomSource, generate_bytes

if TYPE_CHECKING:
    from credkit.config import SecuritySettings

DEFAULT_SALT_LENGTH = 32

_log = get_logger(__name__)


class PasswordHasher:
    """Computes salted password hashes.

    The strategy is resolved when the hasher is built, so a misconfigured
    strategy raises :class:`~credkit.kernel.errors.UnsupportedStrategyError`
    at startup rather than on the first request.
    """

    def __init__(
        self,
        strategy: str = DEFAULT_STRATEGY,
        *,
        salt_length: int = DEFAULT_SALT_LENGTH,
        random_bytes: RandomSource = generate_bytes,
        registry: StrategyRegistry | None = None,
    ) -> None:
        if salt_length < 1:
            raise ValueError(f"salt_length must be positive, got {salt_length}")
        self._kdf = (registry or default_registry()).resolve(strategy)
        self._strategy = strategy
        self._salt_length = salt_length
        self._random_bytes = random_bytes
        _log.debug("password.hasher_configured", strategy=strategy, salt_length=salt_length)

    @classmethod
    def from_settings(cls, settings: SecuritySettings) -> PasswordHasher:
        return cls(
            settings.password_strategy,
            salt_length=settings.password_salt_length,
            registry=settings.strategy_registry(),
        )

    @property
    def strategy(self) -> str:
        return self._strategy

    def compute_hash(self, password: str) -> str:
        """Return ``strategy.base64(salt).base64(hash)`` for *password*."""
        salt = self._random_bytes(self._salt_length)
        derived = self._kdf.derive(password.encode("utf-8"), salt)
        return str(PasswordHash(strategy=self._strategy, salt=salt, hash=derived))


__all__ = ["DEFAULT_SALT_LENGTH", "PasswordHasher"]
