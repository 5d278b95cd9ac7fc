"""
Graph engine for dslab.

This package provides:
- The Graph data structure (directed or undirected, insertion ordered)
- Traversal algorithms (BFS, recursive and iterative DFS)
- Adjacency-matrix export

All algorithms are deterministic: neighbors are visited in edge insertion
order and matrix rows follow vertex insertion order.
"""

from .core import Edge, Graph, GraphResult, TraversalResult
from .matrix import adjacency_matrix
from .traversal import bfs, dfs_iterative, dfs_recursive
from .utils import vertex_index_map

__all__ = [
    "Graph",
    "Edge",
    "GraphResult",
    "TraversalResult",
    "bfs",
    "dfs_recursive",
    "dfs_iterative",
    "adjacency_matrix",
    "vertex_index_map",
]

# Example usage:
# from dslab.graphs import Graph
#
# G = Graph(directed=True)
# G.add_vertex('A')
# G.add_vertex('B')
# G.add_edge('A', 'B')
# G.dfs('A').order  # ('A', 'B')
