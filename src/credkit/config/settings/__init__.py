"""Config settings – 12-factor env-based configuration."""
from credkit.config.settings.base import REDACTED, Settings, secret_field
from credkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from credkit.config.settings.security import SecuritySettings

__all__ = ["REDACTED", "EnvSettingsLoader", "SecuritySettings", "Settings", "SettingsLoader", "secret_field"]
