"""collapsible-tree - index/path correspondence and immutable edits for collapsible trees."""

from __future__ import annotations

from collapsible_tree.api import (
    add_node_under_parent,
    change_node_at_path,
    get_descendant_count,
    get_node_at_path,
    get_visible_node_count,
    get_visible_node_info_at_index,
    get_visible_node_info_flattened,
    map_tree,
    remove_node_at_path,
    toggle_expanded_for_all,
    walk,
)
from collapsible_tree.errors import PathNotFoundError, PathStructureError, TreePathError
from collapsible_tree.index import TreeIndex
from collapsible_tree.result import REMOVE, NodeInfo, NodeLocation, WalkControl
from collapsible_tree.traversal.config import TraversalConfig
from collapsible_tree.traversal.indexed import tree_index_key
from collapsible_tree.tree.nodes import TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "REMOVE",
    "NodeInfo",
    "NodeLocation",
    "PathNotFoundError",
    "PathStructureError",
    "TraversalConfig",
    "TreeIndex",
    "TreeNode",
    "TreePathError",
    "WalkControl",
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
    "tree_index_key",
    "walk",
]
