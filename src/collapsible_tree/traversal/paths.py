"""Key-path guided descent.

A key-path is not an index: to follow it, each level recomputes the tree
index of every child it inspects, because ``key_fn`` may depend on that
index.  Children whose key does not match are skipped with
``next_index_after`` so their subtree is never keyed.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from typing import Any

from collapsible_tree.result import NodeLocation
from collapsible_tree.traversal.indexed import KeyFn, next_index_after
from collapsible_tree.tree.nodes import PseudoRoot, get_children, has_concrete_children

__all__ = ["find_node_at_path", "iter_key_matches"]


def iter_key_matches(
    parent: Any,
    parent_index: int,
    key: Hashable,
    key_fn: KeyFn,
    ignore_collapsed: bool = True,
) -> Iterator[tuple[int, Any, int]]:
    """Yield ``(position, child, tree_index)`` for children of ``parent`` keyed ``key``.

    ``key_fn`` is called once per inspected child, with the tree index that
    child holds in the current traversal.  Keys are expected to be unique
    among siblings, so callers normally stop at the first match.
    """
    child_index = parent_index + 1
    for position, child in enumerate(get_children(parent)):
        if key_fn(child, child_index) == key:
            yield position, child, child_index
        child_index = next_index_after(child, child_index, ignore_collapsed)


def _locate(
    parent: Any,
    parent_index: int,
    path: tuple[Hashable, ...],
    depth: int,
    key_fn: KeyFn,
    ignore_collapsed: bool,
) -> NodeLocation | None:
    last = depth == len(path) - 1
    for _, child, child_index in iter_key_matches(
        parent, parent_index, path[depth], key_fn, ignore_collapsed
    ):
        if last:
            return NodeLocation(node=child, tree_index=child_index)
        if not has_concrete_children(child):
            continue
        found = _locate(child, child_index, path, depth + 1, key_fn, ignore_collapsed)
        if found is not None:
            return found
    return None


def find_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    key_fn: KeyFn,
    ignore_collapsed: bool = True,
) -> NodeLocation | None:
    """Return the node reached by ``path`` and its tree index, or None.

    Lookup is a query: an empty path, an absent key or a path running past a
    leaf all yield None rather than an error.
    """
    path = tuple(path)
    if not path or not tree:
        return None
    return _locate(PseudoRoot(children=tree), -1, path, 0, key_fn, ignore_collapsed)
