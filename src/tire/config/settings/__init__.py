"""Config settings – 12-factor env-based configuration."""
from tire.config.settings.base import Settings
from tire.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tire.config.settings.tire import LOG_LEVELS, TireSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LOG_LEVELS",
    "Settings",
    "SettingsLoader",
    "TireSettings",
]
