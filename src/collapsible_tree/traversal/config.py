"""TraversalConfig for collapse-rule configuration.

TraversalConfig is a frozen (immutable) dataclass holding the options shared
by every walk whose collapse rule is caller-selectable: the callback walk,
path lookup and the path-addressed mutations.  Index resolution,
flattening and visible counting always honour collapsed state.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TraversalConfig"]


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Immutable configuration for configurable traversals.

    Attributes:
        ignore_collapsed: When True (default), children of nodes whose
            ``expanded`` flag is not exactly True are hidden: they consume no
            tree index and are not visited.  When False every node is visited.
    """

    ignore_collapsed: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.ignore_collapsed, bool):
            msg = f"ignore_collapsed must be a bool, got {self.ignore_collapsed!r}"
            raise TypeError(msg)
