"""
Utility functions for graph algorithms.

Provides the vertex-to-index mapping that fixes row and column order of the
adjacency matrix.
"""

from typing import Dict, Iterable, List, Tuple


def vertex_index_map(vertices: Iterable[str]) -> Tuple[Dict[str, int], List[str]]:
    """
    Map vertices to indices 0..n-1 in the order given.

    Unlike a sorted mapping, insertion order is kept so the matrix lines up
    with the vertex list the user sees. Repeated labels keep their first
    position.

    Args:
        vertices: Iterable of vertex labels.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = vertex_index_map(['c', 'a', 'b'])
        >>> vertex_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_vertex
        ['c', 'a', 'b']
    """
    ordered = list(dict.fromkeys(vertices))
    vertex_to_index = {vertex: idx for idx, vertex in enumerate(ordered)}
    return vertex_to_index, ordered
