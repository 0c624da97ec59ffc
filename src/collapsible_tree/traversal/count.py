"""Visible-node counting without index bookkeeping.

A node contributes 1, plus the sum over its children when it has a concrete
children sequence and ``expanded is True``.  Lazy children are never
counted.  No ordering state is needed, so this does not go through the
indexed walkers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from collapsible_tree.tree.nodes import get_children, has_concrete_children, is_expanded

__all__ = ["get_descendant_count", "get_visible_node_count"]


def _visible_subtree_size(node: Any) -> int:
    if not has_concrete_children(node) or not is_expanded(node):
        return 1
    return 1 + sum(_visible_subtree_size(child) for child in get_children(node))


def get_visible_node_count(tree: Sequence[Any]) -> int:
    """Return the number of visible nodes in a root sequence."""
    return sum(_visible_subtree_size(node) for node in tree)


def get_descendant_count(node: Any, ignore_collapsed: bool = True) -> int:
    """Return how many descendants of ``node`` a walk would visit.

    With ``ignore_collapsed`` a collapsed node reports 0; expanding it grows
    the visible count by exactly the value reported for its expanded copy.
    """
    if not has_concrete_children(node):
        return 0
    if ignore_collapsed and not is_expanded(node):
        return 0
    return sum(
        1 + get_descendant_count(child, ignore_collapsed)
        for child in get_children(node)
    )
