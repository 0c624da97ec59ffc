"""Copy-on-write, key-path addressed tree edits.

Every function here returns a new root list and leaves its input untouched.
Only the chain of ancestors on the edited path is rebuilt (via
``with_children``); every sibling subtree off that path is reused by
reference.

Architecture:
- ``change_node_at_path`` descends guided by the key-path.  At each level
  it keys the children with their current tree index and skips non-matching
  siblings past their visible subtree (``iter_key_matches``).
- Removal and insertion are the same primitive: removal replaces the target
  with ``REMOVE``; insertion replaces the *parent* with a copy holding the
  new child.
- ``map_tree`` rebuilds every visited node bottom-up from a callback.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from enum import Enum
from typing import Any

from collapsible_tree.errors import PathNotFoundError, PathStructureError
from collapsible_tree.result import REMOVE, NodeInfo, Removal
from collapsible_tree.traversal.indexed import KeyFn, descends, tree_index_key
from collapsible_tree.traversal.paths import iter_key_matches
from collapsible_tree.tree.nodes import (
    PseudoRoot,
    get_children,
    has_concrete_children,
    with_children,
    with_expanded,
)

__all__ = [
    "MapCallback",
    "NodeProducer",
    "add_node_under_parent",
    "change_node_at_path",
    "map_tree",
    "remove_node_at_path",
    "toggle_expanded_for_all",
]

NodeProducer = Callable[[Any, int], Any]
MapCallback = Callable[[NodeInfo], Any]


class _Miss(Enum):
    MISS = "miss"


_MISS = _Miss.MISS


def _replaced(items: Sequence[Any], position: int, item: Any) -> list[Any]:
    """Copy of ``items`` with the element at ``position`` swapped for ``item``."""
    return [*items[:position], item, *items[position + 1 :]]


def _without(items: Sequence[Any], position: int) -> list[Any]:
    """Copy of ``items`` with the element at ``position`` dropped."""
    return [*items[:position], *items[position + 1 :]]


def _change_under(
    parent: Any,
    parent_index: int,
    path: tuple[Hashable, ...],
    depth: int,
    new_node: Any,
    key_fn: KeyFn,
    ignore_collapsed: bool,
) -> Any:
    """Rebuild ``parent`` with the change applied below it, or return ``_MISS``."""
    children = get_children(parent)
    last = depth == len(path) - 1
    for position, child, child_index in iter_key_matches(
        parent, parent_index, path[depth], key_fn, ignore_collapsed
    ):
        if last:
            replacement = new_node(child, child_index) if callable(new_node) else new_node
        else:
            if not has_concrete_children(child):
                msg = (
                    f"Path {list(path)!r} continues below {path[depth]!r}, "
                    "which has no children"
                )
                raise PathStructureError(msg, path)
            replacement = _change_under(
                child, child_index, path, depth + 1, new_node, key_fn, ignore_collapsed
            )
            if replacement is _MISS:
                continue

        if replacement is REMOVE:
            return with_children(parent, _without(children, position))
        return with_children(parent, _replaced(children, position, replacement))

    return _MISS


def change_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    new_node: Any | NodeProducer | Removal,
    key_fn: KeyFn,
    ignore_collapsed: bool = True,
) -> list[Any]:
    """Replace the node at ``path`` and return the new root list.

    Args:
        tree:             Root sequence.  Never modified.
        path:             Key-path of the target, first root key first.
        new_node:         Replacement node, ``REMOVE`` to delete the target,
                          or a callable ``new_node(node, tree_index)``
                          producing either.  The callable is invoked once,
                          on the target only.
        key_fn:           ``key_fn(node, tree_index) -> key``.
        ignore_collapsed: Hidden children consume no tree index.

    Returns:
        A new root list.  Subtrees off the path keep reference identity.

    Raises:
        PathNotFoundError:  No node is reached by ``path`` (including an
                            empty path).
        PathStructureError: ``path`` continues below a node without
                            concrete children.
    """
    path = tuple(path)
    if not path:
        raise PathNotFoundError("Cannot change a node at an empty path", path)

    result = _change_under(
        PseudoRoot(children=tree), -1, path, 0, new_node, key_fn, ignore_collapsed
    )
    if result is _MISS:
        raise PathNotFoundError(f"No node found at path {list(path)!r}", path)
    return list(result.children)


def remove_node_at_path(
    tree: Sequence[Any],
    path: Sequence[Hashable],
    key_fn: KeyFn,
    ignore_collapsed: bool = True,
) -> list[Any]:
    """Delete the node at ``path`` (and its subtree); return the new root list."""
    return change_node_at_path(tree, path, REMOVE, key_fn, ignore_collapsed)


def _inserted(children: Sequence[Any], new_node: Any, child_index: int | None) -> list[Any]:
    if child_index is None:
        return [*children, new_node]
    if not 0 <= child_index <= len(children):
        msg = f"child_index must be in [0, {len(children)}], got {child_index}"
        raise IndexError(msg)
    return [*children[:child_index], new_node, *children[child_index:]]


def add_node_under_parent(
    tree: Sequence[Any],
    new_node: Any,
    parent_path: Sequence[Hashable],
    key_fn: KeyFn,
    child_index: int | None = None,
    ignore_collapsed: bool = True,
) -> list[Any]:
    """Insert ``new_node`` among the children of the node at ``parent_path``.

    An empty ``parent_path`` inserts into the root sequence.  A parent with
    no children gets a fresh one-element children list; its ``expanded``
    flag is left as it was.

    Args:
        tree:             Root sequence.  Never modified.
        new_node:         Node to insert.
        parent_path:      Key-path of the parent (not of the new node).
        key_fn:           ``key_fn(node, tree_index) -> key``.
        child_index:      Position among the parent's children; None appends.
        ignore_collapsed: Hidden children consume no tree index.

    Raises:
        PathNotFoundError:  ``parent_path`` reaches no node.
        PathStructureError: The parent's children are lazily loaded.
        IndexError:         ``child_index`` is outside ``[0, len(children)]``.
    """
    parent_path = tuple(parent_path)
    if not parent_path:
        return _inserted(tree, new_node, child_index)

    def _add_child(parent: Any, tree_index: int) -> Any:
        children = get_children(parent)
        if children is None:
            children = []
        elif callable(children):
            msg = f"Cannot insert under {list(parent_path)!r}: children are lazily loaded"
            raise PathStructureError(msg, parent_path)
        return with_children(parent, _inserted(children, new_node, child_index))

    return change_node_at_path(tree, parent_path, _add_child, key_fn, ignore_collapsed)


def _map_node(
    node: Any,
    current_index: int,
    callback: MapCallback,
    key_fn: KeyFn,
    path: tuple[Hashable, ...],
    lower_sibling_counts: tuple[int, ...],
    ignore_collapsed: bool,
) -> tuple[Any, int]:
    self_path = (*path, key_fn(node, current_index))
    next_index = current_index + 1
    mapped = node
    if descends(node, ignore_collapsed):
        children = get_children(node)
        child_count = len(children)
        new_children = []
        for position, child in enumerate(children):
            new_child, next_index = _map_node(
                child,
                next_index,
                callback,
                key_fn,
                self_path,
                (*lower_sibling_counts, child_count - position - 1),
                ignore_collapsed,
            )
            new_children.append(new_child)
        mapped = with_children(node, new_children)
    info = NodeInfo(
        node=mapped,
        path=self_path,
        lower_sibling_counts=lower_sibling_counts,
        tree_index=current_index,
    )
    return callback(info), next_index


def map_tree(
    tree: Sequence[Any],
    callback: MapCallback,
    key_fn: KeyFn,
    ignore_collapsed: bool = True,
) -> list[Any]:
    """Rebuild every visited node through ``callback`` and return the new roots.

    Children are mapped before their parent: the ``NodeInfo.node`` handed to
    the callback already carries the mapped children.  Keys are computed on
    the original node at its pre-order tree index.  Under
    ``ignore_collapsed`` the children of collapsed nodes are passed through
    untouched.
    """
    roots = []
    next_index = 0
    child_count = len(tree)
    for position, node in enumerate(tree):
        mapped, next_index = _map_node(
            node,
            next_index,
            callback,
            key_fn,
            (),
            (child_count - position - 1,),
            ignore_collapsed,
        )
        roots.append(mapped)
    return roots


def toggle_expanded_for_all(tree: Sequence[Any], expanded: bool = True) -> list[Any]:
    """Return a copy of the tree with ``expanded`` set on every node."""
    return map_tree(
        tree,
        lambda info: with_expanded(info.node, expanded),
        tree_index_key,
        ignore_collapsed=False,
    )
