"""Unit tests for predicate outcomes."""

from __future__ import annotations

import pytest

from permcompute.permissions import UNKNOWN_ERROR, Allow, Decision, Deny


class TestDecision:
    def test_granted(self) -> None:
        d = Decision.granted()
        assert d.access is True
        assert d.reason is None
        assert d.remediation_option is None
        assert bool(d) is True

    def test_denied_defaults(self) -> None:
        d = Decision.denied()
        assert d.access is False
        assert d.reason == UNKNOWN_ERROR
        assert d.remediation_option == ""
        assert bool(d) is False

    def test_denied_with_reason(self) -> None:
        d = Decision.denied("NOT_OWNER", "request-transfer")
        assert d == Decision(False, "NOT_OWNER", "request-transfer")

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            Decision.granted().access = False  # type: ignore[misc]


class TestAllowDeny:
    def test_allow(self) -> None:
        assert Allow().is_allowed() is True
        assert Allow().to_decision() == Decision.granted()
        assert Allow() == Allow()

    def test_deny(self) -> None:
        deny = Deny("NOT_OWNER", "request-transfer")
        assert deny.is_allowed() is False
        assert deny.reason == "NOT_OWNER"
        assert deny.remediation_option == "request-transfer"
        assert deny.to_decision() == Decision(False, "NOT_OWNER", "request-transfer")

    def test_deny_without_reason(self) -> None:
        assert Deny().to_decision() == Decision(False, UNKNOWN_ERROR, "")

    def test_equality_and_repr(self) -> None:
        assert Deny("A") == Deny("A")
        assert Deny("A") != Deny("B")
        assert Deny("A") != Allow()
        assert repr(Deny("A", "r")) == "Deny('A', 'r')"
        assert repr(Allow()) == "Allow()"
