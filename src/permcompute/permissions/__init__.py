"""Permissions – entity trees, model validation and decision maps."""
from permcompute.permissions.compute import (
    REASONS_KEY,
    REMEDIATION_OPTIONS_KEY,
    compute_permissions,
    resolve_entity,
)
from permcompute.permissions.engine import PermissionEngine
from permcompute.permissions.invoker import try_permission
from permcompute.permissions.outcome import UNKNOWN_ERROR, Allow, Decision, Deny
from permcompute.permissions.types import (
    SEPARATOR,
    NestedEntity,
    Permission,
    PermissionEntity,
    PermissionMap,
    build_entity,
    is_permission_entity,
    is_permission_fn,
    permission,
)
from permcompute.permissions.util import argument_names, get_keys
from permcompute.permissions.validator import check_expected_models, given_models

__all__ = [
    "REASONS_KEY",
    "REMEDIATION_OPTIONS_KEY",
    "SEPARATOR",
    "UNKNOWN_ERROR",
    "Allow",
    "Decision",
    "Deny",
    "NestedEntity",
    "Permission",
    "PermissionEngine",
    "PermissionEntity",
    "PermissionMap",
    "argument_names",
    "build_entity",
    "check_expected_models",
    "compute_permissions",
    "get_keys",
    "given_models",
    "is_permission_entity",
    "is_permission_fn",
    "permission",
    "resolve_entity",
    "try_permission",
]
