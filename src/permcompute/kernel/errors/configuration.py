"""Configuration errors – wiring defects between a caller and its permission map.

These are programming errors, not access decisions: they always propagate
out of :func:`~permcompute.permissions.compute.compute_permissions`.
"""

from __future__ import annotations

from typing import Any, Sequence

from permcompute.kernel.errors.base import BaseError


class EntityConfigurationError(BaseError):
    """The permission map or the supplied models do not fit together."""

    default_code = "entity_configuration_error"

    def __init__(self, message: str, *, entity_name: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.entity_name = entity_name


class InvalidEntityError(EntityConfigurationError):
    """The requested entity name is not part of the permission map."""

    default_code = "invalid_entity"

    def __init__(self, entity_name: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid entity {entity_name}", entity_name=entity_name, **kwargs)


class ModelMismatchError(EntityConfigurationError):
    """The supplied models differ from the ones the entity's predicates need."""

    default_code = "model_mismatch"

    def __init__(
        self,
        entity_name: str,
        expected: Sequence[str],
        given: Sequence[str],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f'Wrong expected models for "{entity_name}". '
            f"Expected: {', '.join(expected)}; "
            f"Given: {', '.join(given)}.",
            entity_name=entity_name,
            detail={"expected": list(expected), "given": list(given)},
            **kwargs,
        )
        self.expected = list(expected)
        self.given = list(given)

    @property
    def missing(self) -> list[str]:
        return [name for name in self.expected if name not in self.given]

    @property
    def unexpected(self) -> list[str]:
        return [name for name in self.given if name not in self.expected]


class MalformedEntityError(EntityConfigurationError):
    """A node in the entity tree is neither a predicate nor a nested entity."""

    default_code = "malformed_entity"

    def __init__(self, entity_name: str, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f'Malformed permission "{path}" in entity "{entity_name}": {reason}',
            entity_name=entity_name,
            detail={"path": path},
            **kwargs,
        )
        self.path = path
        self.reason = reason


__all__ = [
    "EntityConfigurationError",
    "InvalidEntityError",
    "MalformedEntityError",
    "ModelMismatchError",
]
