"""Invariant checks for the three engines.

Each structure has an ``is_valid_*`` predicate and an ``assert_valid_*``
variant that raises ``ValueError`` listing the violations. The checks only
use the engines' public read-only views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set, Tuple

if TYPE_CHECKING:
    from dslab.graphs.core import Graph
    from dslab.hashing.core import HashTable
    from dslab.trees.core import Node, SearchTree


def _hash_table_violations(table: "HashTable") -> List[str]:
    problems: List[str] = []
    buckets = table.buckets()

    if len(buckets) != table.capacity:
        problems.append(f"expected {table.capacity} buckets, found {len(buckets)}")

    seen: Set[str] = set()
    for index, bucket in enumerate(buckets):
        for key, _ in bucket:
            if key in seen:
                problems.append(f"key {key!r} stored more than once")
            seen.add(key)
            expected = table.hash(key)
            if expected != index:
                problems.append(f"key {key!r} in bucket {index}, hashes to {expected}")

    if len(seen) != len(table):
        problems.append(f"entry count {len(table)} does not match {len(seen)} stored keys")
    return problems


def is_valid_hash_table(table: "HashTable") -> bool:
    """Return True if every key sits once, in the bucket its hash selects."""
    return not _hash_table_violations(table)


def assert_valid_hash_table(table: "HashTable") -> None:
    """
    Assert the chaining invariants of a hash table.

    Raises
    ------
    ValueError
        If a key is duplicated, misplaced, or the bucket count changed.
    """
    problems = _hash_table_violations(table)
    if problems:
        raise ValueError("Hash table invariant violated: " + "; ".join(problems))


def _search_tree_violations(tree: "SearchTree") -> List[str]:
    problems: List[str] = []
    seen_nodes: Set[int] = set()
    # (node, exclusive lower bound, exclusive upper bound)
    stack: List[Tuple["Node", Optional[object], Optional[object]]] = []
    if tree.root is not None:
        stack.append((tree.root, None, None))

    while stack:
        node, low, high = stack.pop()
        if id(node) in seen_nodes:
            problems.append(f"node {node.key!r} is reachable from two parents")
            continue
        seen_nodes.add(id(node))

        if low is not None and not low < node.key:
            problems.append(f"key {node.key!r} is not greater than ancestor {low!r}")
        if high is not None and not node.key < high:
            problems.append(f"key {node.key!r} is not less than ancestor {high!r}")

        if node.right is not None:
            stack.append((node.right, node.key, high))
        if node.left is not None:
            stack.append((node.left, low, node.key))
    return problems


def is_valid_search_tree(tree: "SearchTree") -> bool:
    """Return True if the tree satisfies strict BST ordering with unique ownership."""
    return not _search_tree_violations(tree)


def assert_valid_search_tree(tree: "SearchTree") -> None:
    """
    Assert strict BST ordering for every node.

    Raises
    ------
    ValueError
        If any key is out of order relative to an ancestor, or a node is
        shared between two parents.
    """
    problems = _search_tree_violations(tree)
    if problems:
        raise ValueError("Search tree invariant violated: " + "; ".join(problems))


def _graph_violations(graph: "Graph") -> List[str]:
    problems: List[str] = []
    vertices = graph.vertices
    vertex_set = set(vertices)

    if len(vertex_set) != len(vertices):
        problems.append("duplicate vertex labels")

    seen_edges: Set[Tuple[str, ...]] = set()
    for edge in graph.edges:
        if edge.source not in vertex_set or edge.target not in vertex_set:
            problems.append(f"edge {edge.source}->{edge.target} references a missing vertex")
        if edge.source == edge.target:
            problems.append(f"self loop on {edge.source}")
        key = (
            (edge.source, edge.target)
            if graph.directed
            else tuple(sorted((edge.source, edge.target)))
        )
        if key in seen_edges:
            problems.append(f"duplicate edge {edge.source}->{edge.target}")
        seen_edges.add(key)
    return problems


def is_valid_graph(graph: "Graph") -> bool:
    """Return True if edges reference known vertices, without loops or duplicates."""
    return not _graph_violations(graph)


def assert_valid_graph(graph: "Graph") -> None:
    """
    Assert the vertex/edge invariants of a graph.

    Raises
    ------
    ValueError
        If an edge has a missing endpoint, is a self loop, or duplicates
        another edge in the graph's effective direction.
    """
    problems = _graph_violations(graph)
    if problems:
        raise ValueError("Graph invariant violated: " + "; ".join(problems))
