"""Errors raised while loading or checking ``STAFF_*`` settings."""
from staff_admin.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The service cannot start with the configuration it was given."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "setting_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has no default and was not provided",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """Raised when a setting parses but is out of range, empty or unknown."""
    default_code = "setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' rejected ({reason}): {value!r}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
