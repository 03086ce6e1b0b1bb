"""Password hashing strategies and the registry that resolves them.

A strategy identifier is self-describing and stored with every hash::

    pbkdf2/hmacsha256/<base62(key_length)>/<base62(iterations)>

``pbkdf2/hmacsha256/12/G8`` is PBKDF2-HMAC-SHA256 with a 64-byte output and
1000 iterations. Key length precedes the iteration count, matching hashes
written by earlier deployments of this scheme. Identifiers are canonical:
base-62 numbers carry no leading zeros, so a resolved strategy's
``identifier`` equals the string it was parsed from.

New key-derivation families plug in by subclassing
:class:`KeyDerivationStrategy` and registering the class with a
:class:`StrategyRegistry`; hashers and validators are unaffected.
"""
from __future__ import annotations

import abc
import dataclasses
from enum import StrEnum
from typing import ClassVar

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from credkit.kernel.errors import UnsupportedStrategyError
from credkit.primitives import base62

STRATEGY_SEPARATOR = "/"
DEFAULT_STRATEGY = "pbkdf2/hmacsha256/12/G8"


class KdfFamily(StrEnum):
    """Key-derivation families shipped with credkit."""

    PBKDF2 = "pbkdf2"


@dataclasses.dataclass(frozen=True)
class StrategyLimits:
    """Upper bounds applied to parameters decoded from stored identifiers.

    A corrupt or hostile identifier could otherwise demand unbounded CPU
    during validation.
    """

    max_iterations: int = 10_000_000
    max_key_length: int = 1024

    def check(self, identifier: str, name: str, value: int, maximum: int) -> None:
        if not 1 <= value <= maximum:
            raise UnsupportedStrategyError(identifier, f"{name} {value} outside [1, {maximum}]")


class KeyDerivationStrategy(abc.ABC):
    """Port: a password key-derivation function bound to its parameters."""

    family: ClassVar[str]

    @property
    @abc.abstractmethod
    def identifier(self) -> str: ...

    @abc.abstractmethod
    def derive(self, password: bytes, salt: bytes) -> bytes: ...

    @classmethod
    @abc.abstractmethod
    def from_identifier(cls, identifier: str, limits: StrategyLimits) -> KeyDerivationStrategy:
        """Parse *identifier*; raise :class:`UnsupportedStrategyError` if it is not valid."""


_PBKDF2_DIGESTS: dict[str, type[hashes.HashAlgorithm]] = {"hmacsha256": hashes.SHA256}


@dataclasses.dataclass(frozen=True)
class Pbkdf2Strategy(KeyDerivationStrategy):
    """PBKDF2 with HMAC-SHA256 (the only supported digest)."""

    family: ClassVar[str] = KdfFamily.PBKDF2

    key_length: int
    iterations: int
    digest: str = "hmacsha256"

    def __post_init__(self) -> None:
        if self.digest not in _PBKDF2_DIGESTS:
            raise ValueError(f"unsupported PBKDF2 digest {self.digest!r}")
        if self.key_length < 1 or self.iterations < 1:
            raise ValueError("key_length and iterations must be positive")

    @property
    def identifier(self) -> str:
        return STRATEGY_SEPARATOR.join(
            (self.family, self.digest, base62.encode(self.key_length), base62.encode(self.iterations))
        )

    def derive(self, password: bytes, salt: bytes) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=_PBKDF2_DIGESTS[self.digest](),
            length=self.key_length,
            salt=salt,
            iterations=self.iterations,
        )
        return kdf.derive(password)

    @classmethod
    def from_identifier(cls, identifier: str, limits: StrategyLimits) -> Pbkdf2Strategy:
        # family / digest / key length / iterations
        args = identifier.split(STRATEGY_SEPARATOR)
        if len(args) != 4 or args[0] != cls.family:
            raise UnsupportedStrategyError(
                identifier, "expected pbkdf2/<digest>/<key length>/<iterations>"
            )
        _, digest, encoded_length, encoded_iterations = args
        if digest not in _PBKDF2_DIGESTS:
            raise UnsupportedStrategyError(identifier, f"unsupported digest {digest!r}")

        key_length = _decode_parameter(identifier, encoded_length)
        iterations = _decode_parameter(identifier, encoded_iterations)
        limits.check(identifier, "key length", key_length, limits.max_key_length)
        limits.check(identifier, "iterations", iterations, limits.max_iterations)
        return cls(key_length=key_length, iterations=iterations, digest=digest)


def _decode_parameter(identifier: str, encoded: str) -> int:
    try:
        value = base62.decode(encoded)
    except ValueError as exc:
        raise UnsupportedStrategyError(identifier, str(exc), cause=exc) from exc
    if base62.encode(value) != encoded:
        raise UnsupportedStrategyError(identifier, f"non-canonical parameter {encoded!r}")
    return value


class StrategyRegistry:
    """Maps family prefixes to strategy classes."""

    def __init__(self, limits: StrategyLimits | None = None) -> None:
        self._limits = limits or StrategyLimits()
        self._strategies: dict[str, type[KeyDerivationStrategy]] = {}

    @property
    def limits(self) -> StrategyLimits:
        return self._limits

    @property
    def families(self) -> frozenset[str]:
        return frozenset(self._strategies)

    def register(self, strategy_cls: type[KeyDerivationStrategy]) -> None:
        self._strategies[str(strategy_cls.family)] = strategy_cls

    def resolve(self, identifier: str) -> KeyDerivationStrategy:
        """Return the strategy described by *identifier*.

        Raises:
            UnsupportedStrategyError: unknown family or malformed parameters.
        """
        if not identifier:
            raise UnsupportedStrategyError(identifier, "strategy is empty")
        family = identifier.split(STRATEGY_SEPARATOR, 1)[0]
        strategy_cls = self._strategies.get(family)
        if strategy_cls is None:
            raise UnsupportedStrategyError(identifier, f"unknown family {family!r}")
        return strategy_cls.from_identifier(identifier, self._limits)


def default_registry(limits: StrategyLimits | None = None) -> StrategyRegistry:
    """Return a registry with every :class:`KdfFamily` registered."""
    registry = StrategyRegistry(limits)
    registry.register(Pbkdf2Strategy)
    return registry


__all__ = [
    "DEFAULT_STRATEGY",
    "KdfFamily",
    "KeyDerivationStrategy",
    "Pbkdf2Strategy",
    "StrategyLimits",
    "StrategyRegistry",
    "default_registry",
]
