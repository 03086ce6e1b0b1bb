"""Config – settings for keys, strategy and limits, loaded from the environment."""

from credkit.config.settings import (
    REDACTED,
    EnvSettingsLoader,
    SecuritySettings,
    Settings,
    SettingsLoader,
    secret_field,
)
from credkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "REDACTED",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SecuritySettings",
    "Settings",
    "SettingsLoader",
    "secret_field",
]
