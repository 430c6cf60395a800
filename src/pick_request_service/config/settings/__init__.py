"""Config settings – 12-factor env-based configuration."""
from pick_request_service.config.settings.base import Settings
from pick_request_service.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from pick_request_service.config.settings.service import ServiceSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ServiceSettings", "Settings", "SettingsLoader"]
