"""Config validation errors."""
from tire.errors.base import TireError


class SettingsError(TireError):
    """Settings could not be loaded or applied."""
    default_code = "settings_error"


class MissingRequiredSettingError(SettingsError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(SettingsError):
    """A setting is present but its value is unusable, e.g. ``TIRE_URL=localhost``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for '{setting_name}': {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError", "SettingsError"]
