"""Config – settings and configuration errors."""
from pick_request_service.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ServiceSettings,
    Settings,
    SettingsLoader,
)
from pick_request_service.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ServiceSettings",
    "Settings",
    "SettingsLoader",
]
