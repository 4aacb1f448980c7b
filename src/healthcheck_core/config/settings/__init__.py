"""Config settings – 12-factor env-based configuration."""
from healthcheck_core.config.settings.base import Settings
from healthcheck_core.config.settings.health import HealthCheckSettings, default_settings
from healthcheck_core.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "HealthCheckSettings", "Settings", "SettingsLoader", "default_settings"]
