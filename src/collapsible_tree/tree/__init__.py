"""Tree subpackage: node shape and structural accessors.

Re-exports the public API for the tree module:
- TreeNode: dataclass node with payload, children and expanded fields
- PseudoRoot: transient wrapper around a root sequence used by traversals
- get_children / has_concrete_children / is_expanded: duck-typed accessors
- with_children / with_expanded: copy-and-override builders
"""

from collapsible_tree.tree.nodes import (
    PseudoRoot,
    TreeNode,
    get_children,
    has_concrete_children,
    is_expanded,
    with_children,
    with_expanded,
)

__all__ = [
    "PseudoRoot",
    "TreeNode",
    "get_children",
    "has_concrete_children",
    "is_expanded",
    "with_children",
    "with_expanded",
]
