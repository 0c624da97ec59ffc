"""Node accessors, the TreeNode dataclass and the traversal PseudoRoot.

Nodes are duck-typed.  Any ``Mapping`` (usually a plain ``dict``) or any
dataclass instance exposing ``children`` / ``expanded`` works.  Only two
fields are structural:

- ``children``: absent or None, a concrete sequence of nodes, or a callable
  that lazily produces children (never traversed by this package).
- ``expanded``: tri-state (unset / False / True).  Only ``True`` expands.

Every other field is opaque payload and survives rebuilds verbatim: the
``with_*`` builders copy all fields and override a single one.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "PseudoRoot",
    "TreeNode",
    "get_children",
    "has_concrete_children",
    "is_expanded",
    "with_children",
    "with_expanded",
]


@dataclass(slots=True)
class TreeNode:
    """Typed node for callers that prefer attributes over dicts.

    Attributes:
        payload:  Arbitrary caller data.  Never inspected.
        children: None, a sequence of child nodes, or a callable marking
                  lazily-loaded children.
        expanded: None (unset), False or True.
    """

    payload: dict[str, Any] = field(default_factory=dict)
    children: Sequence[Any] | Callable[..., Any] | None = None
    expanded: bool | None = None


@dataclass(frozen=True, slots=True)
class PseudoRoot:
    """Transient wrapper that lets a root sequence be walked like children.

    Built at the start of a traversal and dropped at its end.  It always
    counts as expanded and never contributes a key, an index or a callback.
    """

    children: Sequence[Any]
    expanded: bool = True


def _field(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def get_children(node: Any) -> Any:
    """Return the raw ``children`` value of a node (may be None or callable)."""
    return _field(node, "children")


def has_concrete_children(node: Any) -> bool:
    """True when ``children`` is an actual sequence rather than absent or lazy."""
    children = get_children(node)
    return children is not None and not callable(children)


def is_expanded(node: Any) -> bool:
    """True only when ``expanded`` is exactly ``True``."""
    return _field(node, "expanded") is True


def _with_field(node: Any, name: str, value: Any) -> Any:
    if isinstance(node, Mapping):
        return {**node, name: value}
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        return dataclasses.replace(node, **{name: value})
    raise TypeError(f"Unsupported node type: {type(node)!r}")


def with_children(node: Any, children: Sequence[Any]) -> Any:
    """Return a copy of ``node`` whose ``children`` is replaced.

    Mappings are rebuilt as ``dict``; dataclasses via ``dataclasses.replace``.

    Raises:
        TypeError: If the node is neither a Mapping nor a dataclass instance.
    """
    return _with_field(node, "children", children)


def with_expanded(node: Any, expanded: bool) -> Any:
    """Return a copy of ``node`` whose ``expanded`` flag is replaced."""
    return _with_field(node, "expanded", expanded)
