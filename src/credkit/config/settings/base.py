"""Config settings – Settings base class and secret fields."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

REDACTED = "[REDACTED]"


def secret_field(**kwargs: Any) -> Any:
    """Declare a dataclass field whose value never appears in ``repr`` or :meth:`Settings.redacted`."""
    metadata = {**kwargs.pop("metadata", {}), "secret": True}
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses that hold key material declare those fields with
    :func:`secret_field` and use ``@dataclass(repr=False)`` so the masking
    ``__repr__`` below is inherited.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def redacted(self) -> dict[str, Any]:
        """Field values with secrets masked, safe to log."""
        return {
            field.name: REDACTED if field.metadata.get("secret") else getattr(self, field.name)
            for field in dataclasses.fields(self)
        }

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self.redacted().items())
        return f"{type(self).__name__}({body})"


__all__ = ["REDACTED", "Settings", "secret_field"]
