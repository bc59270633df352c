"""Shared fixtures for the permcompute test suite."""

from __future__ import annotations

from permcompute.testing.fixtures import fake_predicate  # noqa: F401
