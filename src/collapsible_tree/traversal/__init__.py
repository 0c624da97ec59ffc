"""traversal subpackage: indexed walks, visible counting and path descent.

Import from this module (not from sub-modules directly) to stay on the
stable interface.

Example::

    from collapsible_tree.traversal import find_at_index_or_next
    from collapsible_tree.tree import PseudoRoot

    tree = [{"id": "a", "expanded": True, "children": [{"id": "b"}]}]
    info = find_at_index_or_next(
        PseudoRoot(children=tree), -1, 1, lambda node, index: node["id"]
    )
    # info.path == ("a", "b")
"""

from __future__ import annotations

from collapsible_tree.traversal.config import TraversalConfig
from collapsible_tree.traversal.count import get_descendant_count, get_visible_node_count
from collapsible_tree.traversal.indexed import (
    STOPPED,
    KeyFn,
    NextIndex,
    WalkCallback,
    descends,
    find_at_index_or_next,
    next_index_after,
    tree_index_key,
    walk_descendants,
)
from collapsible_tree.traversal.paths import find_node_at_path, iter_key_matches

__all__ = [
    "STOPPED",
    "KeyFn",
    "NextIndex",
    "TraversalConfig",
    "WalkCallback",
    "descends",
    "find_at_index_or_next",
    "find_node_at_path",
    "get_descendant_count",
    "get_visible_node_count",
    "iter_key_matches",
    "next_index_after",
    "tree_index_key",
    "walk_descendants",
]
