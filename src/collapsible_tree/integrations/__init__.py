"""Integrations subpackage for collapsible-tree.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_tree_consistent`` fixture

The plugin module is loaded by pytest itself and is not imported here, so
pytest stays an optional (test-time) dependency.
"""

from __future__ import annotations

__all__: list[str] = []
