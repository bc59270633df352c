"""Config settings – 12-factor env-based configuration."""
from permcompute.config.settings.base import Settings
from permcompute.config.settings.engine import EngineSettings
from permcompute.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EngineSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
