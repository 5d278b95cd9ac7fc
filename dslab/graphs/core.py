"""
Core graph data structure.

Graph keeps its vertices and edges as insertion-ordered sequences so that
neighbor order, traversal order and matrix rows are deterministic and match
the order in which the user built the graph. Whether edges are directed is
fixed when the graph is created.

Complexity:
    - add_vertex: O(1)
    - add_edge / remove_edge / neighbors: O(E)
    - remove_vertex: O(E)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from dslab.core import OperationResult, Status, is_blank
from dslab.diagnostics import assert_valid_graph, is_debug_enabled
from dslab.logging import get_logger

from .matrix import adjacency_matrix
from .traversal import bfs, dfs_iterative
from .utils import vertex_index_map

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """An edge as the user entered it.

    Parameters
    ----------
    source:
        Vertex the edge starts at.
    target:
        Vertex the edge ends at. For undirected graphs the two endpoints are
        interchangeable when checking for duplicates and finding neighbors,
        but the stored order is kept for display.
    """

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


@dataclass(frozen=True)
class GraphResult(OperationResult):
    """
    Result of a structural graph operation.

    Attributes:
        vertex: Vertex the operation was called with, if any.
        edge: Edge the operation was called with, if any.
        removed_edges: Edges dropped as a side effect of removing a vertex.
    """

    vertex: Optional[str] = None
    edge: Optional[Edge] = None
    removed_edges: Tuple[Edge, ...] = ()


@dataclass(frozen=True)
class TraversalResult(OperationResult):
    """
    Result of a BFS or DFS.

    Attributes:
        start: Vertex the traversal started from.
        order: Vertices in visiting order; unreachable vertices are absent.
        method: ``"bfs"`` or ``"dfs"``.
    """

    start: Optional[str] = None
    order: Tuple[str, ...] = ()
    method: str = ""


class Graph:
    """
    Unweighted graph over string vertex labels.

    Supports directed and undirected graphs. Self loops and duplicate edges
    are rejected; in an undirected graph ``(a, b)`` and ``(b, a)`` count as
    the same edge.

    Attributes:
        directed: If True, edges go from source to target only.

    Example:
        >>> G = Graph()
        >>> for label in "ABC":
        ...     _ = G.add_vertex(label)
        >>> _ = G.add_edge("A", "B")
        >>> _ = G.add_edge("B", "C")
        >>> G.bfs("A").order
        ('A', 'B', 'C')
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = bool(directed)
        self._vertices: Dict[str, None] = {}
        self._edges: List[Edge] = []

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertices(self) -> Tuple[str, ...]:
        """Vertex labels in insertion order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in insertion order, as entered."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, vertices={len(self._vertices)}, edges={len(self._edges)})"

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            assert_valid_graph(self)

    def has_edge(self, source: str, target: str) -> bool:
        """
        Return True if an edge connects source to target.

        For undirected graphs either stored orientation matches.
        """
        for edge in self._edges:
            if edge.source == source and edge.target == target:
                return True
            if not self._directed and edge.source == target and edge.target == source:
                return True
        return False

    def add_vertex(self, label: str) -> GraphResult:
        """
        Add a vertex.

        Returns:
            ``OK``, ``INVALID_INPUT`` for a blank label, or
            ``DUPLICATE_VERTEX`` if the label is taken.
        """
        if is_blank(label):
            return GraphResult(Status.INVALID_INPUT, "A vertex name is required.")
        if label in self._vertices:
            logger.debug("add_vertex rejected: %r already present", label)
            return GraphResult(
                Status.DUPLICATE_VERTEX, f'Vertex "{label}" already exists.', vertex=label
            )

        self._vertices[label] = None
        logger.debug("added vertex %r", label)
        self._after_mutation()
        return GraphResult(Status.OK, f'Vertex "{label}" added.', changed=True, vertex=label)

    def add_edge(self, source: str, target: str) -> GraphResult:
        """
        Add an edge from source to target.

        Checks, in order: both endpoints given, both endpoints exist, the
        endpoints differ, and the edge is not already present in the graph's
        effective direction.

        Returns:
            ``OK`` or one of ``INVALID_INPUT``, ``UNKNOWN_VERTEX``,
            ``SELF_LOOP``, ``DUPLICATE_EDGE``.
        """
        if is_blank(source) or is_blank(target):
            return GraphResult(
                Status.INVALID_INPUT, "Both a source and a target vertex are required."
            )

        edge = Edge(source, target)
        missing = [label for label in (source, target) if label not in self._vertices]
        if missing:
            logger.debug("add_edge rejected: unknown vertices %s", missing)
            names = ", ".join(f'"{label}"' for label in dict.fromkeys(missing))
            return GraphResult(Status.UNKNOWN_VERTEX, f"Unknown vertex: {names}.", edge=edge)
        if source == target:
            return GraphResult(
                Status.SELF_LOOP, "An edge cannot connect a vertex to itself.", edge=edge
            )
        if self.has_edge(source, target):
            logger.debug("add_edge rejected: %s already present", edge)
            return GraphResult(Status.DUPLICATE_EDGE, f"Edge {edge} already exists.", edge=edge)

        self._edges.append(edge)
        logger.debug("added edge %s", edge)
        self._after_mutation()
        return GraphResult(Status.OK, f"Edge added: {edge}.", changed=True, edge=edge)

    def remove_vertex(self, label: str) -> GraphResult:
        """
        Remove a vertex and every edge that touches it.

        Removing an absent vertex is a reported no-op (``OK`` with
        ``changed=False``).
        """
        if label not in self._vertices:
            return GraphResult(
                Status.OK, f'Vertex "{label}" is not in the graph.', vertex=label
            )

        removed = tuple(e for e in self._edges if label in (e.source, e.target))
        self._edges = [e for e in self._edges if label not in (e.source, e.target)]
        del self._vertices[label]
        logger.debug("removed vertex %r and %d incident edges", label, len(removed))
        self._after_mutation()
        return GraphResult(
            Status.OK,
            f'Vertex "{label}" removed.',
            changed=True,
            vertex=label,
            removed_edges=removed,
        )

    def remove_edge(self, source: str, target: str) -> GraphResult:
        """
        Remove the first edge stored exactly as ``(source, target)``.

        The orientation must match the stored edge even in an undirected
        graph, since callers pass edges back as they were displayed.

        Returns:
            ``OK`` or ``NOT_FOUND``.
        """
        edge = Edge(source, target)
        for position, stored in enumerate(self._edges):
            if stored == edge:
                del self._edges[position]
                logger.debug("removed edge %s", edge)
                self._after_mutation()
                return GraphResult(Status.OK, f"Edge {edge} removed.", changed=True, edge=edge)

        return GraphResult(Status.NOT_FOUND, f"Edge {edge} not found.", edge=edge)

    def clear(self) -> GraphResult:
        """Remove every vertex and edge. The direction setting is kept."""
        had_content = bool(self._vertices)
        self._vertices = {}
        self._edges = []
        logger.debug("graph cleared")
        return GraphResult(Status.OK, "Graph cleared.", changed=had_content)

    def neighbors(self, vertex: str) -> List[str]:
        """
        Return vertices one edge away from ``vertex``.

        Targets of outgoing edges come first, in edge insertion order. For
        undirected graphs they are followed by the sources of incoming edges.
        An unknown vertex has no neighbors.
        """
        result = [e.target for e in self._edges if e.source == vertex]
        if not self._directed:
            result.extend(e.source for e in self._edges if e.target == vertex)
        return result

    def _traverse(self, start: str, method: str) -> TraversalResult:
        if start not in self._vertices:
            return TraversalResult(
                Status.UNKNOWN_VERTEX,
                f'Start vertex "{start}" is not in the graph.',
                start=start,
                method=method,
            )

        order = bfs(self, start) if method == "bfs" else dfs_iterative(self, start)
        label = method.upper()
        return TraversalResult(
            Status.OK,
            f'{label} from "{start}": {" -> ".join(order)}',
            start=start,
            order=tuple(order),
            method=method,
        )

    def bfs(self, start: str) -> TraversalResult:
        """Breadth-first traversal from ``start``. See :func:`dslab.graphs.traversal.bfs`."""
        return self._traverse(start, "bfs")

    def dfs(self, start: str) -> TraversalResult:
        """
        Depth-first traversal from ``start``.

        Runs :func:`dslab.graphs.traversal.dfs_iterative`, which visits in the
        same order as :func:`dslab.graphs.traversal.dfs_recursive` and does not
        depend on the interpreter recursion limit.
        """
        return self._traverse(start, "dfs")

    def vertex_index(self) -> Dict[str, int]:
        """Map each vertex to its row/column in :meth:`adjacency_matrix`."""
        return vertex_index_map(self._vertices)[0]

    def adjacency_matrix(self) -> np.ndarray:
        """Return the 0/1 adjacency matrix. See :func:`dslab.graphs.matrix.adjacency_matrix`."""
        return adjacency_matrix(self)
