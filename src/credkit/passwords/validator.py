"""Password validation against stored hashes, with an upgrade signal."""
from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from credkit.kernel.errors import InvalidPasswordHashError, UnsupportedStrategyError
from credkit.observability.logging import get_logger
from credkit.passwords.record import PasswordHash
from credkit.passwords.strategy import DEFAULT_STRATEGY, StrategyRegistry, default_registry
from credkit.primitives.compare import constant_time_equal

if TYPE_CHECKING:
    from credkit.config import SecuritySettings

_log = get_logger(__name__)


class PasswordCheck(NamedTuple):
    """Outcome of :meth:`PasswordValidator.validate_password`.

    ``needs_upgrade`` is advisory: the caller should re-hash the password with
    the current strategy and persist it.
    """

    matches: bool
    needs_upgrade: bool


_NO_MATCH = PasswordCheck(matches=False, needs_upgrade=False)


class PasswordValidator:
    """Validates passwords using the strategy embedded in each stored hash.

    Malformed stored hashes and unknown strategies are reported as a plain
    non-match; nothing is raised for bad input.
    """

    def __init__(
        self,
        default_strategy: str = DEFAULT_STRATEGY,
        *,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self._registry = registry or default_registry()
        self._registry.resolve(default_strategy)
        self._default_strategy = default_strategy

    @classmethod
    def from_settings(cls, settings: SecuritySettings) -> PasswordValidator:
        return cls(settings.password_strategy, registry=settings.strategy_registry())

    @property
    def default_strategy(self) -> str:
        return self._default_strategy

    def validate_password(self, password: str, stored_hash: str) -> PasswordCheck:
        if not password or not stored_hash:
            return _NO_MATCH

        try:
            record = PasswordHash.parse(stored_hash)
            kdf = self._registry.resolve(record.strategy)
            computed = kdf.derive(password.encode("utf-8"), record.salt)
        except (InvalidPasswordHashError, UnsupportedStrategyError, UnicodeEncodeError) as exc:
            _log.debug("password.unverifiable", error=type(exc).__name__)
            return _NO_MATCH

        matches = constant_time_equal(record.hash, computed)
        needs_upgrade = matches and record.strategy != self._default_strategy
        if needs_upgrade:
            _log.info(
                "password.needs_upgrade",
                stored_strategy=record.strategy,
                default_strategy=self._default_strategy,
            )
        return PasswordCheck(matches=matches, needs_upgrade=needs_upgrade)


__all__ = ["PasswordCheck", "PasswordValidator"]
