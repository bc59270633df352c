"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── HttpError                    (http.py)
    └── EntityConfigurationError     (configuration.py)
        ├── InvalidEntityError
        ├── ModelMismatchError
        └── MalformedEntityError
"""

from permcompute.kernel.errors.base import BaseError
from permcompute.kernel.errors.configuration import (
    EntityConfigurationError,
    InvalidEntityError,
    MalformedEntityError,
    ModelMismatchError,
)
from permcompute.kernel.errors.http import (
    HttpError,
    bad_request,
    custom,
    forbidden,
    internal_server_error,
    not_found,
    unauthorized,
)

__all__ = [
    "BaseError",
    "EntityConfigurationError",
    "HttpError",
    "InvalidEntityError",
    "MalformedEntityError",
    "ModelMismatchError",
    "bad_request",
    "custom",
    "forbidden",
    "internal_server_error",
    "not_found",
    "unauthorized",
]
