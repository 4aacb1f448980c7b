"""Config settings – HealthCheckSettings."""
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Mapping

from healthcheck_core.config.settings.base import Settings
from healthcheck_core.config.settings.loaders import EnvSettingsLoader
from healthcheck_core.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class HealthCheckSettings(Settings):
    """Runtime knobs for the check runner.

    Read from ``HEALTHCHECK_*`` environment variables by
    :class:`~healthcheck_core.config.settings.loaders.EnvSettingsLoader`:

    * ``HEALTHCHECK_LOG_FAULTS`` – log a warning when a check raises.
    * ``HEALTHCHECK_SLOW_THRESHOLD_MS`` – log a warning when a check runs
      longer than this many milliseconds; ``0`` disables the warning.
    * ``HEALTHCHECK_LOG_LEVEL`` – level passed to
      :class:`~healthcheck_core.observability.logging.JsonLoggerFactory`.
    """

    _prefix = "HEALTHCHECK"

    log_faults: bool = True
    slow_threshold_ms: int = 0
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.slow_threshold_ms < 0:
            raise InvalidSettingValueError(
                "slow_threshold_ms", self.slow_threshold_ms, "must be >= 0"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )

    @property
    def level(self) -> int:
        """``log_level`` as a :mod:`logging` level number."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HealthCheckSettings:
        """Load settings from the environment (or the given mapping)."""
        return EnvSettingsLoader(environ).load(cls)


@functools.lru_cache(maxsize=1)
def default_settings() -> HealthCheckSettings:
    """``HealthCheckSettings`` loaded from the environment once per process.

    Used by the runner when no settings are passed. Call
    ``default_settings.cache_clear()`` after changing ``HEALTHCHECK_*`` at
    runtime.
    """
    return HealthCheckSettings.from_env()


__all__ = ["HealthCheckSettings", "default_settings"]
