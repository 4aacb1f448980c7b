"""Config validation errors raised while loading ``Settings``."""
from __future__ import annotations

from typing import Any

from healthcheck_core.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable backing a field without default is unset."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(
            f"{env_key} is required but not set",
            detail={"env_key": env_key},
        )
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting has a value that cannot be coerced or fails validation.

    ``env_key`` is set when the value came from the environment, so the
    message points at the variable to fix rather than the dataclass field.
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: Any,
        reason: str,
        *,
        env_key: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        source = env_key or setting_name
        detail: dict[str, Any] = {"setting": setting_name, "value": value, "reason": reason}
        if env_key is not None:
            detail["env_key"] = env_key
        super().__init__(f"{source}={value!r} is invalid: {reason}", detail=detail, cause=cause)
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
