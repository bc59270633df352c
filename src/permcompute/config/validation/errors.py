"""Errors raised while loading ``EngineSettings`` and other settings dataclasses."""
from permcompute.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded from the environment or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no ``<PREFIX>_<FIELD>`` variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A variable is set but cannot be coerced or fails ``_validate``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
