"""Tests for the indexed traversal primitives.

Covers:
- find_at_index_or_next: matches, sibling counts, paths, NextIndex fallthrough
- collapse rule: collapsed and lazy subtrees consume exactly one index
- next_index_after: subtree skipping without key computation
- walk_descendants: pre-order visitation and early STOP
"""

from __future__ import annotations

from typing import Any

import pytest

from collapsible_tree.result import NodeInfo, WalkControl
from collapsible_tree.traversal.indexed import (
    STOPPED,
    NextIndex,
    descends,
    find_at_index_or_next,
    next_index_after,
    tree_index_key,
    walk_descendants,
)
from collapsible_tree.tree.nodes import PseudoRoot


def id_key(node: Any, tree_index: int) -> str:
    return node["id"]


def failing_key(node: Any, tree_index: int) -> str:
    raise AssertionError(f"key_fn called for {node!r}")


@pytest.fixture
def tree() -> list[dict[str, Any]]:
    return [
        {"id": "a", "expanded": True, "children": [{"id": "b"}, {"id": "c"}]},
        {"id": "d"},
    ]


@pytest.fixture
def deep_tree() -> list[dict[str, Any]]:
    return [
        {
            "id": "a",
            "expanded": True,
            "children": [
                {
                    "id": "b",
                    "expanded": True,
                    "children": [{"id": "c"}, {"id": "d"}, {"id": "e"}],
                },
                {"id": "f", "children": [{"id": "g"}]},
            ],
        },
        {"id": "h", "expanded": True, "children": [{"id": "i"}]},
    ]


# ---------------------------------------------------------------------------
# descends
# ---------------------------------------------------------------------------


class TestDescends:
    def test_leaf(self) -> None:
        assert not descends({"id": "x"})

    def test_collapsed_with_children(self) -> None:
        node = {"id": "x", "children": [{"id": "y"}]}
        assert not descends(node)
        assert descends(node, ignore_collapsed=False)

    def test_expanded_with_children(self) -> None:
        assert descends({"expanded": True, "children": [{"id": "y"}]})

    def test_lazy_children_never_entered(self) -> None:
        node = {"expanded": True, "children": lambda: []}
        assert not descends(node)
        assert not descends(node, ignore_collapsed=False)

    def test_pseudo_root_always_entered(self) -> None:
        assert descends(PseudoRoot(children=[{"id": "a"}]))


# ---------------------------------------------------------------------------
# find_at_index_or_next
# ---------------------------------------------------------------------------


class TestFindAtIndexOrNext:
    def test_finds_nested_node(self, tree: list[dict[str, Any]]) -> None:
        """Index 2 is c: path (a, c), one sibling after a, none after c."""
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 2, id_key)
        assert result == NodeInfo(
            node={"id": "c"},
            path=("a", "c"),
            lower_sibling_counts=(1, 0),
            tree_index=2,
        )
        assert result.node is tree[0]["children"][1]

    def test_finds_first_root(self, tree: list[dict[str, Any]]) -> None:
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 0, id_key)
        assert isinstance(result, NodeInfo)
        assert result.node is tree[0]
        assert result.path == ("a",)
        assert result.lower_sibling_counts == (1,)

    def test_finds_last_root(self, tree: list[dict[str, Any]]) -> None:
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 3, id_key)
        assert isinstance(result, NodeInfo)
        assert result.path == ("d",)
        assert result.lower_sibling_counts == (0,)

    def test_past_the_end_reports_next_index(self, tree: list[dict[str, Any]]) -> None:
        """A miss returns NextIndex past the last visible node."""
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 10, id_key)
        assert result == NextIndex(4)

    def test_collapsed_subtree_consumes_one_index(self, tree: list[dict[str, Any]]) -> None:
        tree[0]["expanded"] = False
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 1, id_key)
        assert isinstance(result, NodeInfo)
        assert result.node is tree[1]

    def test_ignore_collapsed_false_visits_hidden(self, tree: list[dict[str, Any]]) -> None:
        tree[0]["expanded"] = False
        result = find_at_index_or_next(
            PseudoRoot(children=tree), -1, 1, id_key, ignore_collapsed=False
        )
        assert isinstance(result, NodeInfo)
        assert result.path == ("a", "b")

    def test_ignore_collapsed_false_reaches_grandchildren(
        self, deep_tree: list[dict[str, Any]]
    ) -> None:
        """Collapse-blind traversal propagates below the first level."""
        result = find_at_index_or_next(
            PseudoRoot(children=deep_tree), -1, 6, id_key, ignore_collapsed=False
        )
        assert isinstance(result, NodeInfo)
        assert result.path == ("a", "f", "g")

    def test_lazy_children_consume_one_index(self) -> None:
        tree = [
            {"id": "a", "expanded": True, "children": lambda: [{"id": "hidden"}]},
            {"id": "b"},
        ]
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 1, id_key)
        assert isinstance(result, NodeInfo)
        assert result.path == ("b",)

    def test_deep_lower_sibling_counts(self, deep_tree: list[dict[str, Any]]) -> None:
        """d sits under b (one sibling f after it) under a (one sibling h after it)."""
        result = find_at_index_or_next(PseudoRoot(children=deep_tree), -1, 3, id_key)
        assert isinstance(result, NodeInfo)
        assert result.path == ("a", "b", "d")
        assert result.lower_sibling_counts == (1, 1, 1)

    def test_indices_after_collapsed_sibling(self, deep_tree: list[dict[str, Any]]) -> None:
        """f is collapsed, so h follows f directly."""
        result = find_at_index_or_next(PseudoRoot(children=deep_tree), -1, 6, id_key)
        assert isinstance(result, NodeInfo)
        assert result.path == ("h",)
        assert result.tree_index == 6

    def test_key_fn_receives_tree_index(self, tree: list[dict[str, Any]]) -> None:
        """Keys built from the tree index reflect each ancestor's own index."""
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, 2, tree_index_key)
        assert isinstance(result, NodeInfo)
        assert result.path == (0, 2)

    def test_key_fn_called_once_per_visited_node(self, tree: list[dict[str, Any]]) -> None:
        calls: list[tuple[str, int]] = []

        def recording_key(node: Any, tree_index: int) -> str:
            calls.append((node["id"], tree_index))
            return node["id"]

        find_at_index_or_next(PseudoRoot(children=tree), -1, 3, recording_key)
        assert calls == [("a", 0), ("b", 1), ("c", 2), ("d", 3)]

    def test_pseudo_root_never_matches(self, tree: list[dict[str, Any]]) -> None:
        """The pseudo-root sits at -1 but is never returned."""
        result = find_at_index_or_next(PseudoRoot(children=tree), -1, -1, id_key)
        assert result == NextIndex(4)

    def test_no_target_computes_no_keys(self, tree: list[dict[str, Any]]) -> None:
        result = find_at_index_or_next(tree[0], 0, None, failing_key)
        assert result == NextIndex(3)


class TestNextIndexAfter:
    def test_leaf(self) -> None:
        assert next_index_after({"id": "x"}, 5) == 6

    def test_expanded_subtree(self, deep_tree: list[dict[str, Any]]) -> None:
        """a, b, c, d, e, f are visible under a: six indices."""
        assert next_index_after(deep_tree[0], 0) == 6

    def test_collapsed_subtree_skipped_whole(self) -> None:
        node = {"id": "x", "children": [{"id": "y", "children": [{"id": "z"}]}]}
        assert next_index_after(node, 3) == 4

    def test_collapse_blind(self, deep_tree: list[dict[str, Any]]) -> None:
        assert next_index_after(deep_tree[0], 0, ignore_collapsed=False) == 7


# ---------------------------------------------------------------------------
# walk_descendants
# ---------------------------------------------------------------------------


class TestWalkDescendants:
    def test_visits_in_pre_order(self, deep_tree: list[dict[str, Any]]) -> None:
        seen: list[tuple[str, int]] = []

        def record(info: NodeInfo) -> None:
            seen.append((info.node["id"], info.tree_index))

        result = walk_descendants(PseudoRoot(children=deep_tree), -1, record, id_key)
        assert seen == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
            ("d", 3),
            ("e", 4),
            ("f", 5),
            ("h", 6),
            ("i", 7),
        ]
        assert result == NextIndex(8)

    def test_pseudo_root_not_reported(self, tree: list[dict[str, Any]]) -> None:
        seen: list[NodeInfo] = []
        walk_descendants(PseudoRoot(children=tree), -1, seen.append, id_key)
        assert all(not isinstance(info.node, PseudoRoot) for info in seen)
        assert [info.path for info in seen] == [("a",), ("a", "b"), ("a", "c"), ("d",)]

    def test_stop_aborts_immediately(self, deep_tree: list[dict[str, Any]]) -> None:
        """Returning STOP at b skips b's children, b's siblings and later roots."""
        seen: list[str] = []

        def stop_at_b(info: NodeInfo) -> WalkControl:
            seen.append(info.node["id"])
            if info.node["id"] == "b":
                return WalkControl.STOP
            return WalkControl.CONTINUE

        result = walk_descendants(PseudoRoot(children=deep_tree), -1, stop_at_b, id_key)
        assert result is STOPPED
        assert seen == ["a", "b"]

    def test_stop_inside_subtree_propagates(self, deep_tree: list[dict[str, Any]]) -> None:
        seen: list[str] = []

        def stop_at_d(info: NodeInfo) -> WalkControl | None:
            seen.append(info.node["id"])
            return WalkControl.STOP if info.node["id"] == "d" else None

        result = walk_descendants(PseudoRoot(children=deep_tree), -1, stop_at_d, id_key)
        assert result is STOPPED
        assert seen == ["a", "b", "c", "d"]

    def test_false_is_not_a_stop_signal(self, tree: list[dict[str, Any]]) -> None:
        """Only the WalkControl.STOP member stops; arbitrary return values do not."""
        seen: list[NodeInfo] = []

        def returns_values(info: NodeInfo) -> Any:
            seen.append(info)
            return False

        walk_descendants(PseudoRoot(children=tree), -1, returns_values, id_key)
        assert len(seen) == 4

    def test_collapse_blind_walk(self, deep_tree: list[dict[str, Any]]) -> None:
        seen: list[str] = []
        walk_descendants(
            PseudoRoot(children=deep_tree),
            -1,
            lambda info: seen.append(info.node["id"]),
            id_key,
            ignore_collapsed=False,
        )
        assert seen == ["a", "b", "c", "d", "e", "f", "g", "h", "i"]
