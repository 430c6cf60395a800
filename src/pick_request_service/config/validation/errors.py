"""Config validation errors.

Raised at startup, before any message is consumed; they never reach the
flawed-message handler.
"""
from pick_request_service.kernel.errors import BaseError


class ConfigError(BaseError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No environment variable was set for a field without a default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' must be set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value could not be coerced, or failed ``Settings._validate``."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for '{setting_name}': {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
