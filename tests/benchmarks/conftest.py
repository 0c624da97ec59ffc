"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Three tiers: a wide flat list, a balanced nested tree, and a deep chain.
The balanced tree is half expanded so that collapse skipping is exercised.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_tree(num_nodes: int) -> list[dict[str, Any]]:
    """Generate a single level of leaf nodes."""
    return [{"id": f"leaf_{i}"} for i in range(num_nodes)]


def generate_balanced_tree(
    depth: int, fan_out: int, prefix: str = "n"
) -> list[dict[str, Any]]:
    """Generate ``fan_out`` roots, each a full subtree ``depth`` levels deep.

    Every even-positioned node is expanded, every odd one collapsed.
    """
    if depth == 0:
        return []
    nodes: list[dict[str, Any]] = []
    for i in range(fan_out):
        node_id = f"{prefix}_{i}"
        node: dict[str, Any] = {"id": node_id}
        children = generate_balanced_tree(depth - 1, fan_out, node_id)
        if children:
            node["children"] = children
            node["expanded"] = i % 2 == 0
        nodes.append(node)
    return nodes


def generate_chain(depth: int) -> list[dict[str, Any]]:
    """Generate a single expanded path ``depth`` nodes long."""
    node: dict[str, Any] = {"id": f"c_{depth - 1}"}
    for level in range(depth - 2, -1, -1):
        node = {"id": f"c_{level}", "expanded": True, "children": [node]}
    return [node]


# --- Fixtures for each size tier ---


@pytest.fixture
def flat_1000() -> list[dict[str, Any]]:
    """1000 root-level leaves."""
    return generate_flat_tree(1000)


@pytest.fixture
def balanced_6x4() -> list[dict[str, Any]]:
    """4 roots, 6 levels, fan-out 4 (5460 nodes, roughly half visible)."""
    return generate_balanced_tree(6, 4)


@pytest.fixture
def balanced_4x4() -> list[dict[str, Any]]:
    """4 roots, 4 levels, fan-out 4 (340 nodes)."""
    return generate_balanced_tree(4, 4)


@pytest.fixture
def chain_100() -> list[dict[str, Any]]:
    """A 100-node expanded chain."""
    return generate_chain(100)
