"""dslab - data-structure engines for interactive teaching tools."""

__version__ = "0.1.0"

# Configuration
from .config import (
    DEFAULT_HASH_CAPACITY,
    EngineConfig,
    apply_config,
    config_from_env,
    default_config,
    new_graph,
    new_hash_table,
)

# Outcome vocabulary
from .core import OperationResult, Status

# Diagnostics
from .diagnostics import (
    assert_valid_graph,
    assert_valid_hash_table,
    assert_valid_search_tree,
    debug_context,
    is_debug_enabled,
    is_valid_graph,
    is_valid_hash_table,
    is_valid_search_tree,
    set_debug_enabled,
)

# Graph engine
from .graphs import (
    Edge,
    Graph,
    GraphResult,
    TraversalResult,
    adjacency_matrix,
    bfs,
    dfs_iterative,
    dfs_recursive,
)

# Hash table engine
from .hashing import HashResult, HashTable, char_code_hash

# Search tree engine
from .trees import Node, SearchResult, SearchTree, TreeResult

__all__ = [
    # Version
    "__version__",
    # Configuration
    "DEFAULT_HASH_CAPACITY",
    "EngineConfig",
    "config_from_env",
    "default_config",
    "apply_config",
    "new_hash_table",
    "new_graph",
    # Outcomes
    "Status",
    "OperationResult",
    # Diagnostics
    "is_valid_hash_table",
    "assert_valid_hash_table",
    "is_valid_search_tree",
    "assert_valid_search_tree",
    "is_valid_graph",
    "assert_valid_graph",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Hash table
    "HashTable",
    "HashResult",
    "char_code_hash",
    # Search tree
    "Node",
    "SearchTree",
    "SearchResult",
    "TreeResult",
    # Graph
    "Graph",
    "Edge",
    "GraphResult",
    "TraversalResult",
    "bfs",
    "dfs_recursive",
    "dfs_iterative",
    "adjacency_matrix",
]
