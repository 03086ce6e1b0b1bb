"""Config validation errors."""
from credkit.kernel.errors import BaseError

_MASK = "[REDACTED]"


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid.

    With ``secret=True`` the offending value is masked in the message and
    in ``value``; key material must never reach logs through this error.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, secret: bool = False) -> None:
        shown = _MASK if secret else value
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = shown
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
