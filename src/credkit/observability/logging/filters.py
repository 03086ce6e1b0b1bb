"""Observability – SensitiveFieldsFilter.

Keys match case-insensitively, either exactly or by suffix (``signing_key``,
``reset_token``). Raw ``bytes`` values are masked whatever their key: in this
library they are keys, salts, digests or token payloads.
"""
from __future__ import annotations

from typing import Any

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "password_hash",
        "stored_hash",
        "hash",
        "salt",
        "token",
        "payload",
        "encryption_key",
        "signing_key",
        "secret",
    }
)
DEFAULT_SENSITIVE_SUFFIXES: tuple[str, ...] = ("_key", "_token", "_secret", "_salt", "_password")

_RAW = (bytes, bytearray, memoryview)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(
        self,
        sensitive_fields: frozenset[str] | None = None,
        sensitive_suffixes: tuple[str, ...] | None = None,
    ) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))
        self._suffixes = DEFAULT_SENSITIVE_SUFFIXES if sensitive_suffixes is None else tuple(sensitive_suffixes)

    def is_sensitive(self, key: str) -> bool:
        name = key.lower()
        return name in self._fields or name.endswith(self._suffixes)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self._mask(k, v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts, lists and tuples."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if self.is_sensitive(k):
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            elif isinstance(v, (list, tuple)):
                result[k] = type(v)(self.redact_deep(i) if isinstance(i, dict) else self._mask("", i) for i in v)
            else:
                result[k] = self._mask(k, v)
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        """structlog processor entry point."""
        return self.redact_deep(event_dict)

    def _mask(self, key: str, value: Any) -> Any:
        if isinstance(value, _RAW) or (key and self.is_sensitive(key)):
            return self.REDACTED
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "DEFAULT_SENSITIVE_SUFFIXES", "SensitiveFieldsFilter"]
