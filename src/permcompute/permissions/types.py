"""Permission tree types and the shape classifier.

A permission map is declared as plain nested mappings::

    PERMISSIONS = {
        "posts": {
            "delete": can_delete_post,             # action
            "edit": {"hash": can_edit_post_hash},  # action.subaction
        },
    }

:meth:`PermissionMap.build` compiles it once into :class:`Permission` and
:class:`NestedEntity` nodes, resolving every predicate's required models up
front.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterator, Mapping
from typing import Any, Callable, Iterable, overload

from permcompute.kernel.errors import InvalidEntityError, MalformedEntityError
from permcompute.observability.logging import get_logger
from permcompute.permissions.util import argument_names, get_keys

SEPARATOR = "."

logger = get_logger(__name__)


def _is_async(fn: Any) -> bool:
    call = getattr(fn, "__call__", None)
    return any(
        inspect.iscoroutinefunction(target) or inspect.isasyncgenfunction(target)
        for target in (fn, call)
    )


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Permission:
    """A predicate together with the model names it consumes.

    The predicate is called with exactly its required models as keyword
    arguments, so ``requires`` must match the predicate's parameter names.
    """

    fn: Callable[..., Any]
    requires: tuple[str, ...]

    @classmethod
    def of(cls, fn: Callable[..., Any], requires: Iterable[str] | None = None) -> "Permission":
        """Wrap *fn*, inferring ``requires`` from its signature when omitted.

        Raises :class:`ValueError` for async predicates and for a ``requires``
        list the predicate's signature cannot accept as keyword arguments.
        """
        if isinstance(fn, Permission):
            if requires is not None:
                fn = cls(fn.fn, tuple(dict.fromkeys(requires)))
            fn.check()
            return fn
        if requires is None:
            try:
                requires = argument_names(fn)
            except ValueError as exc:
                raise ValueError(
                    f"cannot infer required models ({exc}), declare them with permission(requires=...)"
                ) from exc
        permission = cls(fn, tuple(dict.fromkeys(requires)))
        permission.check()
        return permission

    def check(self) -> None:
        """Raise :class:`ValueError` unless ``fn`` is synchronous and accepts ``requires``."""
        if _is_async(self.fn):
            raise ValueError(f"{self.name} is async, predicates must return their decision synchronously")
        try:
            signature = inspect.signature(self.fn)
        except (TypeError, ValueError):
            return
        try:
            signature.bind(**dict.fromkeys(self.requires))
        except TypeError as exc:
            raise ValueError(
                f"requires {list(self.requires)} does not match {self.name}{signature}: {exc}"
            ) from exc

    @property
    def name(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))

    def invoke(self, models: Mapping[str, Any]) -> Any:
        return self.fn(**{name: models[name] for name in self.requires})

    def __call__(self, **models: Any) -> Any:
        return self.fn(**models)


@dataclasses.dataclass(frozen=True)
class NestedEntity:
    """Ordered subaction name → :class:`Permission` pairs under one action."""

    subactions: tuple[tuple[str, Permission], ...] = ()

    def items(self) -> Iterator[tuple[str, Permission]]:
        return iter(self.subactions)

    def keys(self) -> list[str]:
        return [name for name, _ in self.subactions]

    def __len__(self) -> int:
        return len(self.subactions)


type Node = Permission | NestedEntity


@dataclasses.dataclass(frozen=True)
class PermissionEntity:
    """A named two-level tree of permission checks."""

    name: str
    actions: tuple[tuple[str, Node], ...] = ()

    def keys(self) -> list[str]:
        return [action for action, _ in self.actions]

    def permissions(self) -> Iterator[tuple[str, Permission]]:
        """Yield ``(key, permission)`` pairs flattened to ``action[.subaction]``."""
        for action, node in self.actions:
            if isinstance(node, Permission):
                yield action, node
            else:
                for subaction, permission in node.items():
                    yield f"{action}{SEPARATOR}{subaction}", permission

    def required_models(self) -> list[str]:
        """Union of every predicate's ``requires``, first-seen order, no duplicates."""
        seen: dict[str, None] = {}
        for _, permission in self.permissions():
            for name in permission.requires:
                seen.setdefault(name, None)
        return list(seen)


# ---------------------------------------------------------------------------
# Shape classifier
# ---------------------------------------------------------------------------


def is_permission_fn(node: Any) -> bool:
    """Return ``True`` if *node* is a predicate whose parameters can be bound to models."""
    if isinstance(node, Permission):
        return True
    if not callable(node) or isinstance(node, Mapping) or _is_async(node):
        return False
    try:
        argument_names(node)
    except (TypeError, ValueError):
        return False
    return True


def is_permission_entity(node: Any) -> bool:
    """Return ``True`` if *node* is a mapping of subactions."""
    if isinstance(node, NestedEntity):
        return True
    return isinstance(node, Mapping) and not callable(node)


@overload
def permission(fn: Callable[..., Any], *, requires: Iterable[str] | None = None) -> Permission: ...
@overload
def permission(
    fn: None = None, *, requires: Iterable[str] | None = None
) -> Callable[[Callable[..., Any]], Permission]: ...


def permission(
    fn: Callable[..., Any] | None = None,
    *,
    requires: Iterable[str] | None = None,
) -> Permission | Callable[[Callable[..., Any]], Permission]:
    """Declare a predicate and the models it needs.

    Example::

        @permission(requires=["user", "post"])
        def can_delete(user, post):
            return post.owner_id == user.id

        @permission
        def can_read(user):
            return user.active
    """

    def decorator(f: Callable[..., Any]) -> Permission:
        return Permission.of(f, requires)

    if fn is not None:
        return decorator(fn)
    return decorator


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------


def _compile(entity_name: str, path: str, node: Any, strict: bool) -> Permission | None:
    try:
        return Permission.of(node)
    except (TypeError, ValueError) as exc:
        _reject(entity_name, path, str(exc), strict)
        return None


def _reject(entity_name: str, path: str, reason: str, strict: bool) -> None:
    if strict:
        raise MalformedEntityError(entity_name, path, reason)
    logger.warning("malformed_node_skipped", entity=entity_name, path=path, reason=reason)


def _check_key(entity_name: str, path: str, key: Any, strict: bool) -> bool:
    if not isinstance(key, str):
        _reject(entity_name, path, f"key {key!r} is not a string", strict)
        return False
    if SEPARATOR in key:
        _reject(entity_name, path, f"key contains the {SEPARATOR!r} separator", strict)
        return False
    return True


def _build_nested(entity_name: str, action: str, node: Any, strict: bool) -> NestedEntity:
    if isinstance(node, NestedEntity):
        return node
    subactions: list[tuple[str, Permission]] = []
    for subaction in get_keys(node):
        path = f"{action}{SEPARATOR}{subaction}"
        if not _check_key(entity_name, path, subaction, strict):
            continue
        subnode = node[subaction]
        if is_permission_entity(subnode):
            _reject(entity_name, path, "nesting deeper than action.subaction", strict)
        elif callable(subnode):
            compiled = _compile(entity_name, path, subnode, strict)
            if compiled is not None:
                subactions.append((subaction, compiled))
        else:
            _reject(entity_name, path, f"expected a predicate, got {type(subnode).__name__}", strict)
    return NestedEntity(tuple(subactions))


def build_entity(
    entity_name: str,
    raw: Mapping[str, Any] | PermissionEntity,
    *,
    strict: bool = True,
) -> PermissionEntity:
    """Compile a raw action mapping into a :class:`PermissionEntity`.

    With ``strict=False`` malformed nodes are skipped (and logged) instead of
    raising :class:`MalformedEntityError`; they then contribute no key to the
    decision map.
    """
    if isinstance(raw, PermissionEntity):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedEntityError(
            entity_name, entity_name, f"expected a mapping of actions, got {type(raw).__name__}"
        )

    actions: list[tuple[str, Node]] = []
    for action in get_keys(raw):
        if not _check_key(entity_name, str(action), action, strict):
            continue
        node = raw[action]
        if is_permission_entity(node):
            actions.append((action, _build_nested(entity_name, action, node, strict)))
        elif callable(node):
            compiled = _compile(entity_name, action, node, strict)
            if compiled is not None:
                actions.append((action, compiled))
        else:
            _reject(
                entity_name,
                action,
                f"expected a predicate or a mapping of subactions, got {type(node).__name__}",
                strict,
            )
    return PermissionEntity(entity_name, tuple(actions))


class PermissionMap(Mapping[str, PermissionEntity]):
    """Read-only registry of compiled entities, keyed by entity name."""

    def __init__(self, entities: Mapping[str, PermissionEntity] | None = None) -> None:
        self._entities: dict[str, PermissionEntity] = dict(entities or {})

    @classmethod
    def build(cls, raw: Mapping[str, Any], *, strict: bool = True) -> "PermissionMap":
        """Compile every entity in *raw* (see :func:`build_entity`)."""
        return cls({name: build_entity(name, raw[name], strict=strict) for name in get_keys(raw)})

    def entity(self, entity_name: str) -> PermissionEntity:
        """Return the entity named *entity_name* or raise :class:`InvalidEntityError`."""
        try:
            return self._entities[entity_name]
        except KeyError:
            raise InvalidEntityError(entity_name) from None

    def __getitem__(self, entity_name: str) -> PermissionEntity:
        return self._entities[entity_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"PermissionMap({list(self._entities)!r})"


__all__ = [
    "SEPARATOR",
    "NestedEntity",
    "Node",
    "Permission",
    "PermissionEntity",
    "PermissionMap",
    "build_entity",
    "is_permission_entity",
    "is_permission_fn",
    "permission",
]
