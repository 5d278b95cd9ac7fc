"""
Adjacency matrix export.

The matrix is the 0/1 view of the edge list used by the presentation layer's
table display.
"""

from typing import TYPE_CHECKING

import numpy as np

from .utils import vertex_index_map

if TYPE_CHECKING:
    from .core import Graph


def adjacency_matrix(graph: "Graph") -> np.ndarray:
    """
    Compute the adjacency matrix A of a graph.

    A[i, j] = 1 iff an edge goes from vertex i to vertex j, with vertices in
    insertion order. Each undirected edge sets both A[i, j] and A[j, i], so
    the matrix of an undirected graph is symmetric.

    Args:
        graph: Graph instance.

    Returns:
        (n, n) integer numpy array. An empty graph gives shape (0, 0).

    Example:
        >>> G = Graph()
        >>> for v in "ABC":
        ...     _ = G.add_vertex(v)
        >>> _ = G.add_edge("A", "B")
        >>> _ = G.add_edge("B", "C")
        >>> adjacency_matrix(G).tolist()
        [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    """
    vertex_to_idx, _ = vertex_index_map(graph.vertices)
    n = len(vertex_to_idx)

    A = np.zeros((n, n), dtype=int)

    for edge in graph.edges:
        i = vertex_to_idx[edge.source]
        j = vertex_to_idx[edge.target]
        A[i, j] = 1
        if not graph.directed:
            A[j, i] = 1

    return A
