"""Config – 12-factor settings and the process-wide client configuration."""

from tire.config.configuration import Configuration, configure, reset
from tire.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    TireSettings,
)
from tire.config.validation import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsError,
)

__all__ = [
    "Configuration",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsError",
    "SettingsLoader",
    "TireSettings",
    "configure",
    "reset",
]
