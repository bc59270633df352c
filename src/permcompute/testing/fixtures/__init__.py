"""Testing fixtures – pytest fixtures for fake doubles.

Enable in your ``conftest.py``::

    pytest_plugins = ["permcompute.testing.fixtures"]
"""
from permcompute.testing.fixtures.predicates import fake_predicate

__all__ = ["fake_predicate"]
