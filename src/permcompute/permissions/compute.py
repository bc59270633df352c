"""Top-level evaluation – flatten an entity's predicates into a decision map."""
from __future__ import annotations

from typing import Any, Mapping

from permcompute.kernel.errors import InvalidEntityError
from permcompute.observability.logging import get_logger
from permcompute.permissions.invoker import try_permission
from permcompute.permissions.types import PermissionEntity, PermissionMap, build_entity
from permcompute.permissions.validator import check_expected_models

REASONS_KEY = "$reasons"
REMEDIATION_OPTIONS_KEY = "$remediationOptions"

logger = get_logger(__name__)


def resolve_entity(entities: Mapping[str, Any], entity_name: str) -> PermissionEntity:
    """Look up *entity_name*, compiling it when *entities* holds raw mappings."""
    if isinstance(entities, PermissionMap):
        try:
            return entities.entity(entity_name)
        except InvalidEntityError:
            logger.error("invalid_entity", entity=entity_name)
            raise

    raw = entities.get(entity_name)
    if raw is None:
        logger.error("invalid_entity", entity=entity_name)
        raise InvalidEntityError(entity_name)
    return build_entity(entity_name, raw)


def compute_permissions(
    entities: Mapping[str, Any],
    entity_name: str,
    required_models: Mapping[str, Any],
    provide_reasons: bool = False,
) -> dict[str, Any]:
    """Evaluate every predicate of *entity_name* against *required_models*.

    Returns a flat ``{"action": bool, "action.subaction": bool}`` dict.  With
    *provide_reasons* the dict also carries ``"$reasons"`` and
    ``"$remediationOptions"``, mapping denied keys to their reason code and
    remediation hint.

    Raises
    ------
    InvalidEntityError
        *entity_name* is not in *entities*.
    ModelMismatchError
        *required_models* does not supply exactly the models the entity's
        predicates declare.
    MalformedEntityError
        A raw (uncompiled) entity contains a node that is neither a predicate
        nor a mapping of subactions.
    """
    entity = resolve_entity(entities, entity_name)
    check_expected_models(entity, required_models)

    permissions: dict[str, bool] = {}
    reasons: dict[str, str] = {}
    remediation_options: dict[str, str] = {}

    for key, permission in entity.permissions():
        decision = try_permission(permission, required_models, key=key)
        permissions[key] = decision.access
        if decision.reason:
            reasons[key] = decision.reason
        if decision.remediation_option:
            remediation_options[key] = decision.remediation_option

    logger.debug(
        "permissions_computed",
        entity=entity_name,
        keys=len(permissions),
        denied=sum(1 for access in permissions.values() if not access),
    )

    if provide_reasons:
        return {
            **permissions,
            REASONS_KEY: reasons,
            REMEDIATION_OPTIONS_KEY: remediation_options,
        }
    return permissions


__all__ = [
    "REASONS_KEY",
    "REMEDIATION_OPTIONS_KEY",
    "compute_permissions",
    "resolve_entity",
]
