"""Config – 12-factor settings and loaders."""

from permcompute.config.settings import EngineSettings, EnvSettingsLoader, Settings, SettingsLoader
from permcompute.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EngineSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
