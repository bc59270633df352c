"""Predicate outcomes – Allow / Deny variants and the normalised Decision."""

from __future__ import annotations

import dataclasses

UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclasses.dataclass(frozen=True)
class Decision:
    """Uniform result of invoking one predicate."""

    access: bool
    reason: str | None = None
    remediation_option: str | None = None

    @classmethod
    def granted(cls) -> "Decision":
        return cls(access=True)

    @classmethod
    def denied(cls, reason: str | None = None, remediation_option: str | None = None) -> "Decision":
        return cls(
            access=False,
            reason=reason or UNKNOWN_ERROR,
            remediation_option=remediation_option or "",
        )

    def __bool__(self) -> bool:
        return self.access


class Allow:
    """Explicit grant returned by a predicate."""

    __slots__ = ()

    def is_allowed(self) -> bool:
        return True

    def to_decision(self) -> Decision:
        return Decision.granted()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Allow)

    def __hash__(self) -> int:
        return hash(Allow)

    def __repr__(self) -> str:
        return "Allow()"


class Deny:
    """Explicit denial returned by a predicate, with an optional reason code.

    Equivalent to raising an :class:`~permcompute.kernel.errors.HttpError`
    with the same code and ``remediationOptions``, without going through
    exception handling.
    """

    __slots__ = ("_reason", "_remediation_option")

    def __init__(self, reason: str | None = None, remediation_option: str | None = None) -> None:
        self._reason = reason
        self._remediation_option = remediation_option

    @property
    def reason(self) -> str | None:
        return self._reason

    @property
    def remediation_option(self) -> str | None:
        return self._remediation_option

    def is_allowed(self) -> bool:
        return False

    def to_decision(self) -> Decision:
        return Decision.denied(self._reason, self._remediation_option)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Deny)
            and other._reason == self._reason
            and other._remediation_option == self._remediation_option
        )

    def __hash__(self) -> int:
        return hash((Deny, self._reason, self._remediation_option))

    def __repr__(self) -> str:
        return f"Deny({self._reason!r}, {self._remediation_option!r})"


type Outcome = Allow | Deny

__all__ = ["UNKNOWN_ERROR", "Allow", "Decision", "Deny", "Outcome"]
