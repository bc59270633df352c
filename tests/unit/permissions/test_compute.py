"""Unit tests for compute_permissions."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from permcompute.kernel.errors import (
    InvalidEntityError,
    MalformedEntityError,
    ModelMismatchError,
    forbidden,
    not_found,
)
from permcompute.permissions import (
    REASONS_KEY,
    REMEDIATION_OPTIONS_KEY,
    UNKNOWN_ERROR,
    Deny,
    PermissionMap,
    compute_permissions,
    permission,
)
from permcompute.testing import FakePredicate

USER = {"id": 1}


def fn_needs_user(user):
    return True


def fn_not_owner(user):
    raise forbidden("NOT_OWNER", {"remediationOptions": "request-transfer"})


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_single_action_granted(self) -> None:
        entities = {"users": {"delete": fn_needs_user}}
        assert compute_permissions(entities, "users", {"user": USER}) == {"delete": True}

    def test_single_action_denied_with_reasons(self) -> None:
        entities = {"users": {"delete": fn_not_owner}}
        result = compute_permissions(entities, "users", {"user": USER}, provide_reasons=True)
        assert result == {
            "delete": False,
            "$reasons": {"delete": "NOT_OWNER"},
            "$remediationOptions": {"delete": "request-transfer"},
        }

    def test_missing_model_never_produces_a_map(self) -> None:
        fake = FakePredicate(["user"])
        with pytest.raises(ModelMismatchError, match="users"):
            compute_permissions({"users": {"delete": fake.permission}}, "users", {})
        assert fake.call_count == 0


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


class TestFlattening:
    def test_subactions_use_dot_separator(self) -> None:
        entities = {"posts": {"delete": {"editHash": fn_needs_user}}}
        assert compute_permissions(entities, "posts", {"user": USER}) == {"delete.editHash": True}

    def test_action_and_subactions_mix(self) -> None:
        entities = {
            "posts": {
                "read": fn_needs_user,
                "edit": {"title": fn_needs_user, "hash": lambda user: False},
                "delete": fn_not_owner,
            }
        }
        result = compute_permissions(entities, "posts", {"user": USER})
        assert result == {"read": True, "edit.title": True, "edit.hash": False, "delete": False}
        assert list(result) == ["read", "edit.title", "edit.hash", "delete"]

    def test_empty_entity_yields_empty_map(self) -> None:
        assert compute_permissions({"noop": {}}, "noop", {}) == {}

    def test_empty_nested_entity_contributes_nothing(self) -> None:
        entities = {"posts": {"read": fn_needs_user, "edit": {}}}
        assert compute_permissions(entities, "posts", {"user": USER}) == {"read": True}


# ---------------------------------------------------------------------------
# Reasons
# ---------------------------------------------------------------------------


class TestReasons:
    def test_boolean_results_have_no_reasons(self) -> None:
        entities = {"posts": {"read": lambda user: True, "edit": lambda user: False}}
        result = compute_permissions(entities, "posts", {"user": USER}, provide_reasons=True)
        assert result == {"read": True, "edit": False, REASONS_KEY: {}, REMEDIATION_OPTIONS_KEY: {}}

    def test_reasons_omitted_by_default_even_on_denial(self) -> None:
        entities = {"posts": {"delete": fn_not_owner}}
        result = compute_permissions(entities, "posts", {"user": USER})
        assert REASONS_KEY not in result
        assert REMEDIATION_OPTIONS_KEY not in result
        assert result == {"delete": False}

    def test_error_without_code_gives_unknown_error(self) -> None:
        def broken(user):
            raise ZeroDivisionError

        def anonymous_denial(user):
            raise not_found()

        entities = {"posts": {"read": broken, "edit": {"hash": anonymous_denial}}}
        result = compute_permissions(entities, "posts", {"user": USER}, provide_reasons=True)
        assert result["read"] is False
        assert result["edit.hash"] is False
        assert result[REASONS_KEY] == {"read": UNKNOWN_ERROR, "edit.hash": UNKNOWN_ERROR}
        assert result[REMEDIATION_OPTIONS_KEY] == {}

    def test_reason_without_remediation(self) -> None:
        entities = {"posts": {"edit": {"hash": lambda user: Deny("LOCKED")}}}
        result = compute_permissions(entities, "posts", {"user": USER}, provide_reasons=True)
        assert result[REASONS_KEY] == {"edit.hash": "LOCKED"}
        assert result[REMEDIATION_OPTIONS_KEY] == {}

    def test_failing_predicate_does_not_stop_siblings(self) -> None:
        first = FakePredicate(["user"], raises=RuntimeError("boom"))
        second = FakePredicate(["user"], returns=True)
        third = FakePredicate(["user"], raises=forbidden("NOPE"))
        fourth = FakePredicate(["user"], returns=True)
        entities = {
            "posts": {
                "a": first.permission,
                "b": second.permission,
                "c": {"x": third.permission, "y": fourth.permission},
            }
        }
        result = compute_permissions(entities, "posts", {"user": USER})
        assert result == {"a": False, "b": True, "c.x": False, "c.y": True}
        assert [p.call_count for p in (first, second, third, fourth)] == [1, 1, 1, 1]


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class TestConfigurationErrors:
    def test_unknown_entity_fails_before_any_predicate(self) -> None:
        fake = FakePredicate(["user"])
        with pytest.raises(InvalidEntityError, match="Invalid entity comments"):
            compute_permissions({"users": {"delete": fake.permission}}, "comments", {"user": USER})
        assert fake.call_count == 0

    def test_unknown_entity_in_compiled_map(self) -> None:
        fake = FakePredicate(["user"])
        pmap = PermissionMap.build({"users": {"delete": fake.permission}})
        with capture_logs() as logs:
            with pytest.raises(InvalidEntityError):
                compute_permissions(pmap, "comments", {"user": USER})
        assert fake.call_count == 0
        assert logs[0]["event"] == "invalid_entity"

    def test_superset_of_models_fails(self) -> None:
        fake = FakePredicate(["user"])
        with pytest.raises(ModelMismatchError) as exc_info:
            compute_permissions(
                {"users": {"delete": fake.permission}}, "users", {"user": USER, "post": {"id": 2}}
            )
        assert exc_info.value.entity_name == "users"
        assert fake.call_count == 0

    def test_models_from_subactions_are_required(self) -> None:
        @permission
        def can_edit_hash(user, post):
            return True

        entities = {"posts": {"read": fn_needs_user, "edit": {"hash": can_edit_hash}}}
        with pytest.raises(ModelMismatchError):
            compute_permissions(entities, "posts", {"user": USER})
        result = compute_permissions(entities, "posts", {"post": {"id": 2}, "user": USER})
        assert result == {"read": True, "edit.hash": True}

    def test_malformed_raw_entity_fails(self) -> None:
        with pytest.raises(MalformedEntityError):
            compute_permissions({"posts": {"read": "always"}}, "posts", {})

    def test_lenient_map_skips_malformed_action(self) -> None:
        pmap = PermissionMap.build({"posts": {"read": fn_needs_user, "bogus": 3}}, strict=False)
        assert compute_permissions(pmap, "posts", {"user": USER}) == {"read": True}


class TestLogging:
    def test_summary_logged_at_debug(self) -> None:
        entities = {"posts": {"read": fn_needs_user, "delete": fn_not_owner}}
        with capture_logs() as logs:
            compute_permissions(entities, "posts", {"user": USER})
        summary = [e for e in logs if e["event"] == "permissions_computed"]
        assert summary == [
            {"event": "permissions_computed", "log_level": "debug", "entity": "posts", "keys": 2, "denied": 1}
        ]

    def test_model_mismatch_logged_at_error(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(ModelMismatchError):
                compute_permissions({"posts": {"read": fn_needs_user}}, "posts", {})
        assert logs[0]["event"] == "model_mismatch"
        assert logs[0]["log_level"] == "error"
