"""Config settings – EngineSettings for the permission engine."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from permcompute.config.settings.base import Settings
from permcompute.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class EngineSettings(Settings):
    """Defaults applied by :class:`~permcompute.permissions.engine.PermissionEngine`.

    Loaded from ``PERMCOMPUTE_*`` environment variables by
    :class:`~permcompute.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "PERMCOMPUTE"

    provide_reasons: bool = False
    strict_shapes: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["EngineSettings"]
