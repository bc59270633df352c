"""Predicate invocation – the single point where predicate failures are contained."""
from __future__ import annotations

import inspect
from typing import Any, Mapping

from permcompute.kernel.errors import BaseError
from permcompute.observability.logging import get_logger
from permcompute.permissions.outcome import Allow, Decision, Deny
from permcompute.permissions.types import Permission

logger = get_logger(__name__)


def _remediation_of(error: BaseError) -> str | None:
    value = error.detail.get("remediationOptions") if error.detail else None
    return value or None


def try_permission(
    permission: Permission,
    models: Mapping[str, Any],
    *,
    key: str | None = None,
) -> Decision:
    """Invoke *permission* with *models* and normalise the outcome.

    * a plain return value becomes ``access`` as-is (coerced to ``bool``);
    * :class:`Allow` / :class:`Deny` map to their :class:`Decision`;
    * a raised :class:`BaseError` (e.g. ``forbidden("NOT_OWNER")``) denies with
      its code and ``detail["remediationOptions"]``;
    * any other exception, or an awaitable result, denies with ``UNKNOWN_ERROR``.

    Exceptions never propagate out of this function.
    """
    try:
        result = permission.invoke(models)
    except BaseError as exc:
        decision = Decision.denied(exc.code, _remediation_of(exc))
        logger.debug("predicate_denied", key=key, predicate=permission.name, reason=decision.reason)
        return decision
    except Exception:  # noqa: BLE001 – predicate failures never escape
        logger.warning("predicate_failed", key=key, predicate=permission.name, exc_info=True)
        return Decision.denied()

    if inspect.isawaitable(result):
        close = getattr(result, "close", None)
        if close is not None:
            close()
        logger.warning("predicate_returned_awaitable", key=key, predicate=permission.name)
        return Decision.denied()
    if isinstance(result, (Allow, Deny)):
        return result.to_decision()
    return Decision(access=bool(result))


__all__ = ["try_permission"]
