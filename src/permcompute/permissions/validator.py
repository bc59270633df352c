"""Model-set validation – supplied models must match what an entity needs."""
from __future__ import annotations

from typing import Any, Mapping

from permcompute.kernel.errors import ModelMismatchError
from permcompute.observability.logging import get_logger
from permcompute.permissions.types import PermissionEntity
from permcompute.permissions.util import get_keys

logger = get_logger(__name__)


def given_models(models: Mapping[str, Any]) -> list[str]:
    """Names of the models in *models* that carry a truthy value.

    A model's truth value must be defined; objects such as numpy arrays,
    whose ``bool()`` raises, should be wrapped before they are supplied.
    """
    return [name for name in get_keys(models) if models[name]]


def _same_members(left: list[str], right: list[str]) -> bool:
    return len(left) == len(right) and all(item in right for item in left)


def check_expected_models(entity: PermissionEntity, models: Mapping[str, Any]) -> None:
    """Raise :class:`ModelMismatchError` unless *models* supplies exactly what *entity* needs.

    Order is irrelevant; a model with a falsy value counts as not supplied.
    A model whose truth value cannot be determined is a mismatch as well.
    """
    expected = entity.required_models()
    try:
        given = given_models(models)
    except (TypeError, ValueError) as exc:
        logger.error("model_mismatch", entity=entity.name, expected=expected, error=str(exc))
        raise ModelMismatchError(entity.name, expected, get_keys(models), cause=exc) from exc
    if not _same_members(given, expected):
        logger.error("model_mismatch", entity=entity.name, expected=expected, given=given)
        raise ModelMismatchError(entity.name, expected, given)


__all__ = ["check_expected_models", "given_models"]
