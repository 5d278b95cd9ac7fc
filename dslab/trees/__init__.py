"""
Binary search tree engine.

Provides an unbalanced BST with path-recording search, three-case deletion,
in-order traversal and height, plus the node-level helpers they are built on.
"""

from .core import LEAF, ONE_CHILD, TWO_CHILDREN, Node, SearchResult, SearchTree, TreeResult
from .traversal import height, inorder

__all__ = [
    "Node",
    "SearchTree",
    "SearchResult",
    "TreeResult",
    "LEAF",
    "ONE_CHILD",
    "TWO_CHILDREN",
    "inorder",
    "height",
]
