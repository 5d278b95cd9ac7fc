"""
Traversals and measurements over binary search tree nodes.

All functions use explicit stacks or queues rather than recursion, so a
degenerate chain (keys inserted in sorted order) of any length is handled
without reaching the interpreter's recursion limit. Results match the usual
recursive definitions exactly.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 12 (Binary Search Trees).
"""

from collections import deque
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .core import Node


def inorder(root: Optional["Node"]) -> List[Any]:
    """
    In-order traversal: left subtree, node, right subtree.

    For a binary search tree the result is in ascending key order.

    Args:
        root: Root of the (sub)tree, or None for an empty tree.

    Returns:
        List of keys in in-order sequence.

    Complexity: O(n) time, O(height) extra space.
    """
    keys: List[Any] = []
    stack: List["Node"] = []
    node = root

    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        keys.append(node.key)
        node = node.right

    return keys


def height(root: Optional["Node"]) -> int:
    """
    Number of nodes on the longest root-to-leaf path.

    Equivalent to ``0`` for an empty tree and
    ``1 + max(height(left), height(right))`` otherwise; computed level by
    level.

    Complexity: O(n) time, O(width) extra space.
    """
    if root is None:
        return 0

    levels = 0
    frontier = deque([root])
    while frontier:
        levels += 1
        for _ in range(len(frontier)):
            node = frontier.popleft()
            if node.left is not None:
                frontier.append(node.left)
            if node.right is not None:
                frontier.append(node.right)
    return levels
