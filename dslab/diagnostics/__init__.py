"""Diagnostics and debugging utilities for dslab."""

from .core import (
    assert_valid_graph,
    assert_valid_hash_table,
    assert_valid_search_tree,
    is_valid_graph,
    is_valid_hash_table,
    is_valid_search_tree,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    parse_flag,
    set_debug_enabled,
)

__all__ = [
    "is_valid_hash_table",
    "assert_valid_hash_table",
    "is_valid_search_tree",
    "assert_valid_search_tree",
    "is_valid_graph",
    "assert_valid_graph",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "parse_flag",
]
