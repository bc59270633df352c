"""Testing fakes – in-memory doubles for predicates."""
from permcompute.testing.fakes.predicates import FakePredicate

__all__ = ["FakePredicate"]
