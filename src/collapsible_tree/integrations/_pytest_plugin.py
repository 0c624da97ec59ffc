"""pytest plugin for collapsible-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from collapsible_tree import (
    get_node_at_path,
    get_visible_node_count,
    get_visible_node_info_at_index,
    get_visible_node_info_flattened,
    tree_index_key,
)
from collapsible_tree.traversal.indexed import KeyFn


def _check_tree(tree: Sequence[Any], key_fn: KeyFn) -> list[str]:
    problems: list[str] = []
    count = get_visible_node_count(tree)
    flattened = get_visible_node_info_flattened(tree, key_fn)

    if len(flattened) != count:
        problems.append(f"visible count {count} != flattened length {len(flattened)}")

    for position, info in enumerate(flattened):
        if info.tree_index != position:
            problems.append(f"[{position}] tree_index is {info.tree_index}")
        resolved = get_visible_node_info_at_index(tree, position, key_fn)
        if resolved is None or resolved.node is not info.node:
            problems.append(f"[{position}] index resolution disagrees with flattening")
            continue
        if resolved.path != info.path:
            problems.append(f"[{position}] path {resolved.path!r} != {info.path!r}")
        if resolved.lower_sibling_counts != info.lower_sibling_counts:
            problems.append(
                f"[{position}] lower_sibling_counts "
                f"{resolved.lower_sibling_counts!r} != {info.lower_sibling_counts!r}"
            )
        located = get_node_at_path(tree, info.path, key_fn)
        if located is None or located.node is not info.node:
            problems.append(f"[{position}] path {info.path!r} does not lead back to node")

    if get_visible_node_info_at_index(tree, count, key_fn) is not None:
        problems.append(f"index {count} (one past the end) resolved to a node")
    return problems


@pytest.fixture(scope="session")
def assert_tree_consistent() -> Any:
    """Fixture that returns a callable tree consistency asserter.

    The fixture is session-scoped because the returned callable is stateless
    (every check goes through the pure public API).

    Usage in tests::

        def test_tree(assert_tree_consistent):
            assert_tree_consistent(tree, key_fn=lambda node, index: node["id"])

    Returns:
        A callable ``_assert(tree, key_fn=tree_index_key) -> None`` that raises
        ``AssertionError`` when visible count, flattening, index resolution
        and path lookup disagree about ``tree``.
    """

    def _assert(tree: Sequence[Any], key_fn: KeyFn = tree_index_key) -> None:
        """Assert that every index/path view of ``tree`` agrees.

        Checks:
            - visible count equals the flattened length;
            - ``flattened[i]`` equals index resolution at ``i``;
            - every flattened path leads back to the same node;
            - the index one past the end resolves to nothing.

        Raises:
            AssertionError: With one line per disagreement found.
        """
        problems = _check_tree(tree, key_fn)
        if problems:
            raise AssertionError(
                "Tree views are inconsistent:\n  " + "\n  ".join(problems)
            )

    return _assert
