"""Public API functions for collapsible-tree.

Each call creates a fresh ``TreeIndex`` to guarantee zero shared state
between calls.  All functions are pure: the input tree is never modified,
and edits return a new root list that shares every untouched subtree with
the input.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

from collapsible_tree.index import TreeIndex
from collapsible_tree.mutation import MapCallback, NodeProducer, toggle_expanded_for_all
from collapsible_tree.result import NodeInfo, NodeLocation, Removal
from collapsible_tree.traversal.config import TraversalConfig
from collapsible_tree.traversal.count import get_descendant_count, get_visible_node_count
from collapsible_tree.traversal.indexed import KeyFn, WalkCallback, tree_index_key

__all__ = [
    "add_node_under_parent",
    "change_node_at_path",
    "get_descendant_count",
    "get_node_at_path",
    "get_visible_node_count",
    "get_visible_node_info_at_index",
    "get_visible_node_info_flattened",
    "map_tree",
    "remove_node_at_path",
    "toggle_expanded_for_all",
    "walk",
]


def get_visible_node_info_at_index(
    tree: Sequence[Any],
    index: int,
    key_fn: KeyFn = tree_index_key,
) -> NodeInfo | None:
    """Return the visible node at ``index`` with its key-path and sibling counts.

    Collapsed nodes hide their children.  Keys are produced by
    ``key_fn(node, tree_index)`` with each ancestor's tree index.

    Args:
        tree:   Root sequence of nodes.
        index:  Zero-based visible position.
        key_fn: Key function.  Defaults to the tree index itself.

    Returns:
        A ``NodeInfo``, or None for an empty tree or an index past the end.
    """
    return TreeIndex(key_fn=key_fn).info_at(tree, index)


def get_visible_node_info_flattened(
    tree: Sequence[Any],
    key_fn: KeyFn = tree_index_key,
) -> list[NodeInfo]:
    """Return a ``NodeInfo`` for every visible node, indexed by visible position.

    ``result[i] == get_visible_node_info_at_index(tree, i, key_fn)`` for every
    ``i`` in range, computed in one pass.
    """
    return TreeIndex(key_fn=key_fn).flatten(tree)


def walk(
    tree: Sequence[Any],
    callback: WalkCallback,
    key_fn: KeyFn = tree_index_key,
    config: TraversalConfig | None = None,
) -> bool:
    """Call ``callback(NodeInfo)`` for every node in pre-order.

    Returning ``WalkControl.STOP`` from the callback aborts the walk at once.

    Returns:
        False if the walk was stopped, True if every node was visited.
    """
    return TreeIndex(key_fn=key_fn, config=config).walk(tree, callback)


def get_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    key_fn: KeyFn = tree_index_key,
    config: TraversalConfig | None = None,
) -> NodeLocation | None:
    """Return the node reached by ``path`` and its tree index, or None."""
    return TreeIndex(key_fn=key_fn, config=config).node_at_path(tree, path)


def change_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    new_node: Any | NodeProducer | Removal,
    key_fn: KeyFn = tree_index_key,
    config: TraversalConfig | None = None,
) -> list[Any]:
    """Replace the node at ``path``; return the new root list.

    Args:
        tree:     Root sequence.  Never modified.
        path:     Key-path of the node to replace.
        new_node: The replacement, ``REMOVE``, or a callable
                  ``new_node(node, tree_index)`` returning either.
        key_fn:   Key function used to produce ``path``.
        config:   Traversal options.  Defaults to ``TraversalConfig()``.

    Raises:
        PathNotFoundError:  ``path`` reaches no node.
        PathStructureError: ``path`` continues below a childless node.
    """
    return TreeIndex(key_fn=key_fn, config=config).change(tree, path, new_node)


def remove_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    key_fn: KeyFn = tree_index_key,
    config: TraversalConfig | None = None,
) -> list[Any]:
    """Delete the node at ``path``; return the new root list.

    Raises:
        PathNotFoundError:  ``path`` reaches no node.
        PathStructureError: ``path`` continues below a childless node.
    """
    return TreeIndex(key_fn=key_fn, config=config).remove(tree, path)


def add_node_under_parent(
    tree: Sequence[Any],
    new_node: Any,
    parent_path: Sequence[Hashable],
    key_fn: KeyFn = tree_index_key,
    child_index: int | None = None,
    config: TraversalConfig | None = None,
) -> list[Any]:
    """Insert ``new_node`` under the node at ``parent_path``; return the new roots.

    An empty ``parent_path`` inserts at root level.  ``child_index=None``
    appends.

    Raises:
        PathNotFoundError:  ``parent_path`` reaches no node.
        PathStructureError: The parent's children are lazily loaded.
        IndexError:         ``child_index`` out of range.
    """
    return TreeIndex(key_fn=key_fn, config=config).insert(
        tree, new_node, parent_path, child_index=child_index
    )


def map_tree(
    tree: Sequence[Any],
    callback: MapCallback,
    key_fn: KeyFn = tree_index_key,
    config: TraversalConfig | None = None,
) -> list[Any]:
    """Rebuild every visited node through ``callback(NodeInfo)``, children first."""
    return TreeIndex(key_fn=key_fn, config=config).map(tree, callback)
