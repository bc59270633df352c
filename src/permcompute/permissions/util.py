"""Small helpers shared by the permission modules."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

_ACCEPTED_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def get_keys(mapping: Mapping[str, Any]) -> list[str]:
    """Return the keys of *mapping* in iteration order."""
    return list(mapping.keys())


def argument_names(fn: Callable[..., Any]) -> list[str]:
    """Return the parameter names *fn* declares, in declaration order.

    Every name must be passable as a keyword argument, since predicates are
    invoked with their models as keywords.  Raises :class:`ValueError` for
    signatures using ``*args``, ``**kwargs`` or positional-only parameters,
    and :class:`TypeError` for objects that are not callable.
    """
    signature = inspect.signature(fn)
    names: list[str] = []
    for param in signature.parameters.values():
        if param.kind not in _ACCEPTED_KINDS:
            raise ValueError(
                f"parameter {param.name!r} of {getattr(fn, '__qualname__', fn)!r} "
                f"cannot be bound to a model ({param.kind.description})"
            )
        names.append(param.name)
    return names


__all__ = ["argument_names", "get_keys"]
