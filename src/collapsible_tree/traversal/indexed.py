"""Indexed depth-first traversal: the primitive every other operation uses.

Each visible node gets a zero-based pre-order tree index.  A node consumes
exactly one index plus one per visible descendant; a childless, lazy or
collapsed subtree consumes exactly one regardless of what it hides.

Two walkers share that rule:

- ``find_at_index_or_next`` searches for a target index and otherwise
  reports the first index past the subtree (``NextIndex``), so a caller can
  skip whole subtrees without re-walking them.
- ``walk_descendants`` calls a callback once per visible node and aborts as
  soon as the callback returns ``WalkControl.STOP``.

Both accept a ``PseudoRoot`` wrapping a root sequence.  The pseudo-root sits
at index -1, is always descended into and never appears in a path or a
callback.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from collapsible_tree.result import NodeInfo, WalkControl
from collapsible_tree.tree.nodes import (
    PseudoRoot,
    get_children,
    has_concrete_children,
    is_expanded,
)

__all__ = [
    "STOPPED",
    "KeyFn",
    "NextIndex",
    "WalkCallback",
    "descends",
    "find_at_index_or_next",
    "next_index_after",
    "tree_index_key",
    "walk_descendants",
]

KeyFn = Callable[[Any, int], Hashable]
WalkCallback = Callable[[NodeInfo], WalkControl | None]


@dataclass(frozen=True, slots=True)
class NextIndex:
    """The target was not inside the subtree; ``value`` is the next free index."""

    value: int


class _Stopped(Enum):
    STOPPED = "stopped"


STOPPED = _Stopped.STOPPED


def tree_index_key(node: Any, tree_index: int) -> Hashable:
    """Default key function: a node's key is its tree index."""
    return tree_index


def descends(node: Any, ignore_collapsed: bool = True) -> bool:
    """Return True when a walk enters the children of ``node``.

    Lazy children are never entered.  Under ``ignore_collapsed`` only
    expanded nodes (and the pseudo-root) are entered.
    """
    if not has_concrete_children(node):
        return False
    if isinstance(node, PseudoRoot) or not ignore_collapsed:
        return True
    return is_expanded(node)


def find_at_index_or_next(
    node: Any,
    current_index: int,
    target_index: int | None,
    key_fn: KeyFn | None,
    *,
    path: tuple[Hashable, ...] = (),
    lower_sibling_counts: tuple[int, ...] = (),
    ignore_collapsed: bool = True,
) -> NodeInfo | NextIndex:
    """Depth-first search for the node sitting at ``target_index``.

    Args:
        node:                 Node (or PseudoRoot) to start from.
        current_index:        Tree index assigned to ``node``.
        target_index:         Index searched for.  None means "no target":
                              only the next free index is computed and
                              ``key_fn`` is never called.
        key_fn:               ``key_fn(node, tree_index) -> key``.  May be
                              None when ``target_index`` is None.
        path:                 Keys of the ancestors of ``node``.
        lower_sibling_counts: Sibling counts accumulated for ``node``.
        ignore_collapsed:     Hide children of non-expanded nodes.

    Returns:
        ``NodeInfo`` for the matching node, or ``NextIndex`` holding the first
        index past the visible subtree of ``node``.
    """
    is_pseudo_root = isinstance(node, PseudoRoot)
    if target_index is None or key_fn is None or is_pseudo_root:
        self_path = path
    else:
        self_path = (*path, key_fn(node, current_index))

    if not is_pseudo_root and current_index == target_index:
        return NodeInfo(
            node=node,
            path=self_path,
            lower_sibling_counts=lower_sibling_counts,
            tree_index=current_index,
        )

    if not descends(node, ignore_collapsed):
        return NextIndex(current_index + 1)

    children = get_children(node)
    child_count = len(children)
    child_index = current_index + 1
    for position, child in enumerate(children):
        result = find_at_index_or_next(
            child,
            child_index,
            target_index,
            key_fn,
            path=self_path,
            lower_sibling_counts=(*lower_sibling_counts, child_count - position - 1),
            ignore_collapsed=ignore_collapsed,
        )
        if isinstance(result, NodeInfo):
            return result
        child_index = result.value

    return NextIndex(child_index)


def next_index_after(node: Any, current_index: int, ignore_collapsed: bool = True) -> int:
    """Return the first tree index past the visible subtree of ``node``.

    Collapsed subtrees are skipped in O(1); no keys are computed.
    """
    result = find_at_index_or_next(
        node, current_index, None, None, ignore_collapsed=ignore_collapsed
    )
    return result.value  # type: ignore[union-attr]


def walk_descendants(
    node: Any,
    current_index: int,
    callback: WalkCallback,
    key_fn: KeyFn,
    *,
    path: tuple[Hashable, ...] = (),
    lower_sibling_counts: tuple[int, ...] = (),
    ignore_collapsed: bool = True,
) -> NextIndex | _Stopped:
    """Pre-order walk calling ``callback(NodeInfo)`` for every visible node.

    Returns:
        ``STOPPED`` as soon as the callback returns ``WalkControl.STOP``
        (no sibling or subtree is visited after that); otherwise the
        ``NextIndex`` past the subtree of ``node``.
    """
    self_path = path
    if not isinstance(node, PseudoRoot):
        self_path = (*path, key_fn(node, current_index))
        info = NodeInfo(
            node=node,
            path=self_path,
            lower_sibling_counts=lower_sibling_counts,
            tree_index=current_index,
        )
        if callback(info) is WalkControl.STOP:
            return STOPPED

    if not descends(node, ignore_collapsed):
        return NextIndex(current_index + 1)

    children = get_children(node)
    child_count = len(children)
    child_index = current_index + 1
    for position, child in enumerate(children):
        result = walk_descendants(
            child,
            child_index,
            callback,
            key_fn,
            path=self_path,
            lower_sibling_counts=(*lower_sibling_counts, child_count - position - 1),
            ignore_collapsed=ignore_collapsed,
        )
        if result is STOPPED:
            return STOPPED
        child_index = result.value

    return NextIndex(child_index)
