"""
Graph traversal algorithms: BFS and DFS.

Neighbors are explored in the order :meth:`Graph.neighbors` returns them
(edge insertion order), so results follow the order in which the graph was
built. A source that is not in the graph yields an empty order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import TYPE_CHECKING, List, Set

if TYPE_CHECKING:
    from .core import Graph


def bfs(graph: "Graph", source: str) -> List[str]:
    """
    Breadth-first search from a source vertex.

    A vertex is marked visited when it is dequeued, and only then are its
    unvisited neighbors enqueued. A vertex can therefore sit in the queue
    more than once, but it is recorded only on its first dequeue.

    Args:
        graph: Graph to traverse.
        source: Vertex to start from.

    Returns:
        Vertices in BFS visiting order. Unreachable vertices are absent.

    Complexity: O(V * E), since neighbors are found by scanning the edge list.

    Example:
        >>> G = Graph()
        >>> for v in "ABC":
        ...     _ = G.add_vertex(v)
        >>> _ = G.add_edge("A", "B")
        >>> _ = G.add_edge("A", "C")
        >>> bfs(G, "A")
        ['A', 'B', 'C']
    """
    if source not in graph:
        return []

    order: List[str] = []
    visited: Set[str] = set()
    queue = deque([source])

    while queue:
        u = queue.popleft()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)

        for v in graph.neighbors(u):
            if v not in visited:
                queue.append(v)

    return order


def dfs_recursive(graph: "Graph", source: str) -> List[str]:
    """
    Depth-first search (recursive implementation).

    Visits ``source``, records it, then recurses into each unvisited
    neighbor in neighbor order.

    Args:
        graph: Graph to traverse.
        source: Vertex to start from.

    Returns:
        Vertices in pre-order (order of first discovery).

    Example:
        >>> G = Graph()
        >>> for v in "ABCD":
        ...     _ = G.add_vertex(v)
        >>> _ = G.add_edge("A", "B")
        >>> _ = G.add_edge("A", "C")
        >>> _ = G.add_edge("B", "D")
        >>> dfs_recursive(G, "A")
        ['A', 'B', 'D', 'C']
    """
    if source not in graph:
        return []

    preorder: List[str] = []
    visited: Set[str] = set()

    def dfs_visit(u: str) -> None:
        visited.add(u)
        preorder.append(u)
        for v in graph.neighbors(u):
            if v not in visited:
                dfs_visit(v)

    dfs_visit(source)
    return preorder


def dfs_iterative(graph: "Graph", source: str) -> List[str]:
    """
    Depth-first search (iterative implementation using a stack).

    Produces exactly the same order as :func:`dfs_recursive` without
    consuming interpreter stack frames, for graphs deep enough to hit the
    recursion limit.

    Args:
        graph: Graph to traverse.
        source: Vertex to start from.

    Returns:
        Vertices in pre-order.
    """
    if source not in graph:
        return []

    preorder: List[str] = []
    visited: Set[str] = set()
    stack: List[str] = [source]

    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        preorder.append(u)

        # Push in reverse so the first neighbor is explored first
        for v in reversed(graph.neighbors(u)):
            if v not in visited:
                stack.append(v)

    return preorder
