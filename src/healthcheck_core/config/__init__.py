"""Config – 12-factor settings and loaders."""

from healthcheck_core.config.settings import (
    EnvSettingsLoader,
    HealthCheckSettings,
    Settings,
    SettingsLoader,
    default_settings,
)
from healthcheck_core.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HealthCheckSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "default_settings",
]
