"""Result and control types shared by traversal, lookup and mutation.

This module provides the records handed back to callers (``NodeInfo``,
``NodeLocation``), the callback control enum for walks (``WalkControl``)
and the removal sentinel accepted by mutations (``REMOVE``).
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any

__all__ = ["REMOVE", "NodeInfo", "NodeLocation", "Removal", "WalkControl"]


class WalkControl(StrEnum):
    """Value a walk callback returns to steer the walk.

    - CONTINUE -> "continue" : keep walking (returning None does the same)
    - STOP     -> "stop"     : abort at once, no further nodes are visited
    """

    CONTINUE = auto()
    STOP = auto()


class Removal(Enum):
    """Tagged sentinel standing in for "no node" in a mutation."""

    REMOVE = "remove"


REMOVE = Removal.REMOVE


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """A visible node together with its position in one traversal.

    Attributes:
        node:                 The node itself (same object as in the tree).
        path:                 Keys from the first real root down to ``node``
                              inclusive; ``len(path) == depth + 1``.
        lower_sibling_counts: Entry i is the number of siblings following the
                              ancestor at depth i (the node itself last).
        tree_index:           Zero-based pre-order position of ``node``.
    """

    node: Any
    path: tuple[Hashable, ...]
    lower_sibling_counts: tuple[int, ...]
    tree_index: int


@dataclass(frozen=True, slots=True)
class NodeLocation:
    """Result of a path lookup: the node and the index it was reached at."""

    node: Any
    tree_index: int
