"""Config validation errors."""
from tire.config.validation.errors import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingsError,
)

__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError", "SettingsError"]
