"""TreeIndex: orchestrator binding a key function and traversal config.

This is the central wiring layer between the traversal/mutation primitives
and the public API.  It owns no tree: every method takes the root sequence
as an argument and returns a fresh value, so one ``TreeIndex`` may serve any
number of trees.

Architecture:
- Index resolution starts ``find_at_index_or_next`` at index -1 on an
  expanded ``PseudoRoot`` and is always collapse-aware.
- Flattening drives ``walk_descendants`` once and collects one ``NodeInfo``
  per visible node, in tree-index order.
- ``walk``, ``node_at_path`` and the mutations honour
  ``TraversalConfig.ignore_collapsed``.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

from collapsible_tree.mutation import (
    MapCallback,
    NodeProducer,
    add_node_under_parent,
    change_node_at_path,
    map_tree,
    remove_node_at_path,
)
from collapsible_tree.result import NodeInfo, NodeLocation, Removal
from collapsible_tree.traversal.config import TraversalConfig
from collapsible_tree.traversal.count import get_visible_node_count
from collapsible_tree.traversal.indexed import (
    STOPPED,
    KeyFn,
    WalkCallback,
    find_at_index_or_next,
    tree_index_key,
    walk_descendants,
)
from collapsible_tree.traversal.paths import find_node_at_path
from collapsible_tree.tree.nodes import PseudoRoot

__all__ = ["TreeIndex"]


class TreeIndex:
    """Index/path correspondence over collapsible trees.

    Answers "which node is at visible position N" and "which key-path leads
    to it", and performs copy-on-write edits addressed by key-path.

    Example::

        from collapsible_tree.index import TreeIndex

        tree = [
            {"id": "a", "expanded": True, "children": [{"id": "b"}, {"id": "c"}]},
            {"id": "d"},
        ]
        index = TreeIndex(key_fn=lambda node, tree_index: node["id"])
        info = index.info_at(tree, 2)
        print(info.path)                   # ("a", "c")
        print(info.lower_sibling_counts)   # (1, 0)
        tree = index.remove(tree, ["a", "b"])
    """

    def __init__(
        self,
        key_fn: KeyFn = tree_index_key,
        config: TraversalConfig | None = None,
    ) -> None:
        """Initialise the index.

        Args:
            key_fn: Pure ``key_fn(node, tree_index) -> key``; keys must be
                unique among siblings.  Defaults to ``tree_index_key``.
            config: Traversal options.  Defaults to ``TraversalConfig()``.
        """
        self._key_fn = key_fn
        self._config: TraversalConfig = config if config is not None else TraversalConfig()

    @property
    def key_fn(self) -> KeyFn:
        return self._key_fn

    @property
    def config(self) -> TraversalConfig:
        return self._config

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def visible_count(self, tree: Sequence[Any]) -> int:
        """Return the number of visible nodes in ``tree``."""
        return get_visible_node_count(tree)

    def info_at(self, tree: Sequence[Any], index: int) -> NodeInfo | None:
        """Return the visible node at ``index`` with its path and sibling counts.

        Args:
            tree:  Root sequence.
            index: Zero-based visible position.

        Returns:
            A ``NodeInfo``, or None when the tree is empty or ``index`` is
            past the last visible node.

        Raises:
            TypeError:  If ``index`` is not an int.
            ValueError: If ``index`` is negative.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            msg = f"index must be an int, got {type(index).__name__}"
            raise TypeError(msg)
        if index < 0:
            msg = f"index must be >= 0, got {index}"
            raise ValueError(msg)
        if not tree:
            return None

        result = find_at_index_or_next(
            PseudoRoot(children=tree), -1, index, self._key_fn, ignore_collapsed=True
        )
        return result if isinstance(result, NodeInfo) else None

    def flatten(self, tree: Sequence[Any]) -> list[NodeInfo]:
        """Return one ``NodeInfo`` per visible node, position-indexed.

        Equivalent to calling ``info_at`` for every visible index, in a
        single pass.
        """
        flattened: list[NodeInfo] = []
        if not tree:
            return flattened
        walk_descendants(
            PseudoRoot(children=tree),
            -1,
            flattened.append,
            self._key_fn,
            ignore_collapsed=True,
        )
        return flattened

    def walk(self, tree: Sequence[Any], callback: WalkCallback) -> bool:
        """Call ``callback(NodeInfo)`` for every node, pre-order.

        Returns:
            False when the callback stopped the walk with ``WalkControl.STOP``,
            True otherwise.
        """
        if not tree:
            return True
        result = walk_descendants(
            PseudoRoot(children=tree),
            -1,
            callback,
            self._key_fn,
            ignore_collapsed=self._config.ignore_collapsed,
        )
        return result is not STOPPED

    def node_at_path(
        self, tree: Sequence[Any], path: Sequence[Hashable]
    ) -> NodeLocation | None:
        """Return the node reached by ``path`` and its tree index, or None."""
        return find_node_at_path(
            tree, path, self._key_fn, ignore_collapsed=self._config.ignore_collapsed
        )

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def change(
        self,
        tree: Sequence[Any],
        path: Sequence[Hashable],
        new_node: Any | NodeProducer | Removal,
    ) -> list[Any]:
        """Replace (or, with ``REMOVE``, delete) the node at ``path``."""
        return change_node_at_path(
            tree, path, new_node, self._key_fn, self._config.ignore_collapsed
        )

    def remove(self, tree: Sequence[Any], path: Sequence[Hashable]) -> list[Any]:
        """Delete the node at ``path`` together with its subtree."""
        return remove_node_at_path(
            tree, path, self._key_fn, self._config.ignore_collapsed
        )

    def insert(
        self,
        tree: Sequence[Any],
        new_node: Any,
        parent_path: Sequence[Hashable],
        child_index: int | None = None,
    ) -> list[Any]:
        """Insert ``new_node`` under the node at ``parent_path``."""
        return add_node_under_parent(
            tree,
            new_node,
            parent_path,
            self._key_fn,
            child_index=child_index,
            ignore_collapsed=self._config.ignore_collapsed,
        )

    def map(self, tree: Sequence[Any], callback: MapCallback) -> list[Any]:
        """Rebuild every visited node through ``callback``."""
        return map_tree(
            tree, callback, self._key_fn, self._config.ignore_collapsed
        )
