"""Testing fixtures – fake_predicate factory."""
from __future__ import annotations

from typing import Any, Callable

import pytest

from permcompute.testing.fakes import FakePredicate


@pytest.fixture
def fake_predicate() -> Callable[..., FakePredicate]:
    """Factory fixture: ``fake_predicate(["user"], returns=False)``."""

    def make(*args: Any, **kwargs: Any) -> FakePredicate:
        return FakePredicate(*args, **kwargs)

    return make


__all__ = ["fake_predicate"]
