"""
permcompute – declarative permission trees evaluated into decision maps.

Import path convention::

    from permcompute import PermissionMap, compute_permissions
    from permcompute.kernel.errors import forbidden
    from permcompute.config import EngineSettings
"""

from permcompute.config import EngineSettings
from permcompute.kernel.errors import (
    BaseError,
    EntityConfigurationError,
    HttpError,
    InvalidEntityError,
    MalformedEntityError,
    ModelMismatchError,
    bad_request,
    custom,
    forbidden,
    internal_server_error,
    not_found,
    unauthorized,
)
from permcompute.permissions import (
    REASONS_KEY,
    REMEDIATION_OPTIONS_KEY,
    UNKNOWN_ERROR,
    Allow,
    Decision,
    Deny,
    NestedEntity,
    Permission,
    PermissionEngine,
    PermissionEntity,
    PermissionMap,
    compute_permissions,
    permission,
)

__version__ = "0.1.0"
__all__ = [
    "REASONS_KEY",
    "REMEDIATION_OPTIONS_KEY",
    "UNKNOWN_ERROR",
    "Allow",
    "BaseError",
    "Decision",
    "Deny",
    "EngineSettings",
    "EntityConfigurationError",
    "HttpError",
    "InvalidEntityError",
    "MalformedEntityError",
    "ModelMismatchError",
    "NestedEntity",
    "Permission",
    "PermissionEngine",
    "PermissionEntity",
    "PermissionMap",
    "__version__",
    "bad_request",
    "compute_permissions",
    "custom",
    "forbidden",
    "internal_server_error",
    "not_found",
    "permission",
    "unauthorized",
]
