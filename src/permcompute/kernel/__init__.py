"""Kernel – framework-agnostic building blocks."""

from permcompute.kernel.errors import (
    BaseError,
    EntityConfigurationError,
    HttpError,
    InvalidEntityError,
    MalformedEntityError,
    ModelMismatchError,
)

__all__ = [
    "BaseError",
    "EntityConfigurationError",
    "HttpError",
    "InvalidEntityError",
    "MalformedEntityError",
    "ModelMismatchError",
]
