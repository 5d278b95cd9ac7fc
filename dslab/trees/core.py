"""
Unbalanced binary search tree.

Each node owns its two children; there are no parent or shared references.
Keys are strictly ordered (left subtree < node < right subtree) and
duplicates are rejected. The tree is never rebalanced, so inserting keys in
sorted order builds a chain whose height equals the number of keys.

Complexity (h = height):
    - insert/search/remove: O(h)
    - inorder_traversal/height/size: O(n)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from dslab.core import OperationResult, Status
from dslab.diagnostics import assert_valid_search_tree, is_debug_enabled
from dslab.logging import get_logger

from .traversal import height, inorder

logger = get_logger(__name__)

LEAF = "leaf"
ONE_CHILD = "one_child"
TWO_CHILDREN = "two_children"


@dataclass(eq=False)
class Node:
    """
    Tree node owning its left and right children.

    Attributes:
        key: Ordering key.
        left: Subtree of smaller keys.
        right: Subtree of larger keys.
    """

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class TreeResult(OperationResult):
    """
    Result of an insert or remove.

    Attributes:
        key: Key the operation was called with.
        removal_case: For a successful remove, which deletion case applied:
            ``"leaf"``, ``"one_child"`` or ``"two_children"``.
        replacement: For the two-children case, the successor key copied into
            the removed node's position.
    """

    key: Any = None
    removal_case: Optional[str] = None
    replacement: Any = None


@dataclass(frozen=True)
class SearchResult(OperationResult):
    """
    Result of a search.

    Attributes:
        key: Key that was searched for.
        path: Keys visited during the descent, in visiting order. Its length
            is the number of comparisons made.
    """

    key: Any = None
    path: Tuple[Any, ...] = ()

    @property
    def found(self) -> bool:
        return self.ok


class SearchTree:
    """
    Binary search tree over totally ordered keys.

    Example:
        >>> tree = SearchTree()
        >>> for key in [5, 3, 8, 1, 4]:
        ...     _ = tree.insert(key)
        >>> tree.inorder_traversal()
        [1, 3, 4, 5, 8]
        >>> tree.height()
        3
        >>> tree.search(4).path
        (5, 3, 4)
    """

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    @property
    def root(self) -> Optional[Node]:
        """Root node, for rendering. Callers must not mutate it."""
        return self._root

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        if self._key_error(key) is not None:
            return False
        return self._locate(key)[1] is not None

    def __repr__(self) -> str:
        return f"SearchTree(size={self.size()}, height={self.height()})"

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            assert_valid_search_tree(self)

    def _key_error(self, key: Any) -> Optional[str]:
        """Return why ``key`` cannot be used, or None if it can."""
        if key is None:
            return "Please enter a key."
        if isinstance(key, float) and math.isnan(key):
            return "NaN cannot be ordered and is not a valid key."
        if self._root is not None:
            try:
                key < self._root.key
            except TypeError:
                return f"{key!r} cannot be compared with the keys in the tree."
        return None

    def _locate(self, key: Any) -> Tuple[Optional[Node], Optional[Node]]:
        """Return (parent, node) for ``key``; node is None if absent."""
        parent: Optional[Node] = None
        node = self._root
        while node is not None:
            if key < node.key:
                parent, node = node, node.left
            elif node.key < key:
                parent, node = node, node.right
            else:
                return parent, node
        return parent, None

    def insert(self, key: Any) -> TreeResult:
        """
        Insert ``key`` as a new leaf at the first empty slot on its descent.

        An existing equal key is left untouched.

        Returns:
            ``OK`` result; ``changed`` is False when the key already existed.
            ``INVALID_INPUT`` for a key that cannot be ordered.
        """
        error = self._key_error(key)
        if error is not None:
            return TreeResult(Status.INVALID_INPUT, error, key=key)

        new_node = Node(key)
        if self._root is None:
            self._root = new_node
            logger.debug("inserted %r as root", key)
            self._after_mutation()
            return TreeResult(Status.OK, f"Inserted {key} into the tree.", changed=True, key=key)

        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = new_node
                    break
                current = current.left
            elif current.key < key:
                if current.right is None:
                    current.right = new_node
                    break
                current = current.right
            else:
                logger.debug("insert of %r ignored: key already present", key)
                return TreeResult(Status.OK, f"{key} already exists in the tree.", key=key)

        logger.debug("inserted %r under %r", key, current.key)
        self._after_mutation()
        return TreeResult(Status.OK, f"Inserted {key} into the tree.", changed=True, key=key)

    def search(self, key: Any) -> SearchResult:
        """
        Descend from the root looking for ``key``, recording every key visited.

        Returns:
            ``OK`` result if found, ``NOT_FOUND`` otherwise; ``path`` is
            populated in both cases (empty for an empty tree).
        """
        error = self._key_error(key)
        if error is not None:
            return SearchResult(Status.INVALID_INPUT, error, key=key)

        path: List[Any] = []
        node = self._root
        while node is not None:
            path.append(node.key)
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                trail = " -> ".join(str(k) for k in path)
                return SearchResult(
                    Status.OK, f"Found {key}. Path: {trail}", key=key, path=tuple(path)
                )

        trail = " -> ".join(str(k) for k in path)
        return SearchResult(
            Status.NOT_FOUND, f"{key} not found. Path taken: {trail}", key=key, path=tuple(path)
        )

    def _replace_child(self, parent: Optional[Node], node: Node, child: Optional[Node]) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def remove(self, key: Any) -> TreeResult:
        """
        Delete ``key`` from the tree.

        Cases at the located node:
            - leaf: detached from its parent.
            - one child: replaced by that child.
            - two children: takes the key of the minimum node of its right
              subtree, and that minimum node (which has no left child) is
              then removed from the right subtree.

        Returns:
            ``OK`` result describing the case applied, ``NOT_FOUND``, or
            ``INVALID_INPUT`` for a key that cannot be ordered.
        """
        error = self._key_error(key)
        if error is not None:
            return TreeResult(Status.INVALID_INPUT, error, key=key)

        parent, node = self._locate(key)
        if node is None:
            logger.debug("remove of %r ignored: key not present", key)
            return TreeResult(Status.NOT_FOUND, f"{key} not found in the tree.", key=key)

        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.key = successor.key
            self._replace_child(successor_parent, successor, successor.right)
            case, replacement = TWO_CHILDREN, successor.key
        else:
            case = LEAF if node.is_leaf else ONE_CHILD
            replacement = None
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)

        logger.debug("removed %r (%s)", key, case)
        self._after_mutation()
        return TreeResult(
            Status.OK,
            f"Removed {key} from the tree.",
            changed=True,
            key=key,
            removal_case=case,
            replacement=replacement,
        )

    def clear(self) -> TreeResult:
        """Drop every node."""
        had_nodes = self._root is not None
        self._root = None
        logger.debug("tree cleared")
        return TreeResult(Status.OK, "Tree cleared.", changed=had_nodes)

    def inorder_traversal(self) -> List[Any]:
        """Return all keys in ascending order."""
        return inorder(self._root)

    def size(self) -> int:
        """Number of keys, derived from the in-order traversal."""
        return len(self.inorder_traversal())

    def height(self) -> int:
        """0 for an empty tree, else the node count of the longest root-to-leaf path."""
        return height(self._root)
