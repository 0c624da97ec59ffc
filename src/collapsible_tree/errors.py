"""Exceptions raised by path-addressed operations.

A key-path handed to a mutation is expected to come from this same engine,
so a path that does not fit the tree signals a consistency bug upstream and
is raised rather than reported as a routine miss.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

__all__ = ["PathNotFoundError", "PathStructureError", "TreePathError"]


class TreePathError(ValueError):
    """Base class for key-paths that cannot be applied to a tree.

    Attributes:
        path: The offending key-path, as a tuple.
    """

    def __init__(self, msg: str, path: Sequence[Hashable]) -> None:
        super().__init__(msg)
        self.path: tuple[Hashable, ...] = tuple(path)


class PathNotFoundError(TreePathError, LookupError):
    """No node in the tree is reached by the key-path."""


class PathStructureError(TreePathError):
    """The key-path continues below a node that has no concrete children."""
