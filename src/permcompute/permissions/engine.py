"""PermissionEngine – a compiled permission map bound to engine settings."""
from __future__ import annotations

from typing import Any, Mapping

from permcompute.config.settings import EngineSettings, EnvSettingsLoader, SettingsLoader
from permcompute.observability.logging import JsonLoggerFactory, get_logger
from permcompute.permissions.compute import compute_permissions
from permcompute.permissions.types import PermissionMap

logger = get_logger(__name__)


class PermissionEngine:
    """Evaluate entities of one :class:`PermissionMap`.

    Example::

        engine = PermissionEngine.from_mapping({"users": {"delete": can_delete}})
        engine.compute("users", {"user": current_user})
        # {"delete": True}
    """

    def __init__(
        self,
        permission_map: PermissionMap,
        settings: EngineSettings | None = None,
    ) -> None:
        self._map = permission_map
        self._settings = settings or EngineSettings()
        logger.debug("permission_engine_ready", entities=list(permission_map))

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        settings: EngineSettings | None = None,
    ) -> "PermissionEngine":
        """Compile *raw* honouring ``settings.strict_shapes``."""
        settings = settings or EngineSettings()
        return cls(PermissionMap.build(raw, strict=settings.strict_shapes), settings)

    @classmethod
    def from_env(
        cls,
        raw: Mapping[str, Any],
        loader: SettingsLoader | None = None,
        *,
        configure_logging: bool = False,
    ) -> "PermissionEngine":
        """Like :meth:`from_mapping`, reading settings from ``PERMCOMPUTE_*`` variables.

        With *configure_logging* the process-wide logging is set up through
        :class:`JsonLoggerFactory` at ``settings.log_level``.
        """
        settings = (loader or EnvSettingsLoader()).load(EngineSettings)
        if configure_logging:
            JsonLoggerFactory.configure(settings.log_level_number)
        return cls.from_mapping(raw, settings)

    @property
    def permission_map(self) -> PermissionMap:
        return self._map

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def entity_names(self) -> list[str]:
        return list(self._map)

    def required_models(self, entity_name: str) -> list[str]:
        """Model names that must be supplied to evaluate *entity_name*."""
        return self._map.entity(entity_name).required_models()

    def compute(
        self,
        entity_name: str,
        models: Mapping[str, Any],
        provide_reasons: bool | None = None,
    ) -> dict[str, Any]:
        if provide_reasons is None:
            provide_reasons = self._settings.provide_reasons
        return compute_permissions(self._map, entity_name, models, provide_reasons)


__all__ = ["PermissionEngine"]
