"""HTTP-flavoured errors raised by permission predicates to deny with a reason."""

from __future__ import annotations

from typing import Any, Callable

from permcompute.kernel.errors.base import BaseError


class HttpError(BaseError):
    """Error carrying an HTTP status, an optional error code and extra metadata.

    ``error`` is the machine-readable reason (``"NOT_OWNER"``) and may be
    absent.  ``extra`` may hold a ``remediationOptions`` hint telling the
    caller how access could be obtained.

    Example::

        def can_delete(user, post):
            if post.owner_id != user.id:
                raise forbidden("NOT_OWNER", {"remediationOptions": "request-transfer"})
            return True
    """

    default_code = None

    def __init__(
        self,
        status_code: int,
        error: str | None = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(error or f"HTTP {status_code}", code=error, detail=extra, **kwargs)
        self.status_code = status_code

    @property
    def error(self) -> str | None:
        return self.code

    @property
    def extra(self) -> dict[str, Any]:
        return self.detail

    @property
    def remediation_options(self) -> str | None:
        return self.detail.get("remediationOptions")

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base

    def __repr__(self) -> str:
        return f"HttpError(status_code={self.status_code!r}, error={self.code!r})"


def _factory(status_code: int) -> Callable[..., HttpError]:
    def create(error: str | None = None, extra: dict[str, Any] | None = None) -> HttpError:
        return HttpError(status_code, error, extra)

    create.__name__ = f"http_{status_code}"
    return create


bad_request = _factory(400)
unauthorized = _factory(401)
forbidden = _factory(403)
not_found = _factory(404)
internal_server_error = _factory(500)


def custom(
    status_code: int,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> HttpError:
    """Build an :class:`HttpError` for an arbitrary *status_code*."""
    return _factory(status_code)(error, extra)


__all__ = [
    "HttpError",
    "bad_request",
    "custom",
    "forbidden",
    "internal_server_error",
    "not_found",
    "unauthorized",
]
