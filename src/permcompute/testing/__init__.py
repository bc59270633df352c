"""Testing support – fakes and fixtures for permission predicates.

Import in your ``conftest.py``::

    pytest_plugins = ["permcompute.testing.fixtures"]
"""

from permcompute.testing.fakes import FakePredicate

__all__ = ["FakePredicate"]
