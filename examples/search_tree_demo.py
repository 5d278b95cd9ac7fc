"""Example: Binary Search Tree with dslab

Builds a small tree, shows search paths, and demonstrates the three
deletion cases.
"""

from typing import Optional

from dslab import Node, SearchTree


def render(node: Optional[Node], prefix: str = "", label: str = "root") -> None:
    if node is None:
        return
    print(f"{prefix}{label}: {node.key}")
    render(node.left, prefix + "    ", "L")
    render(node.right, prefix + "    ", "R")


def main():
    print("=" * 60)
    print("Binary search tree")
    print("=" * 60)

    tree = SearchTree()
    for key in [50, 30, 70, 20, 40, 60, 80, 65]:
        tree.insert(key)
    print(tree.insert(40).message)

    render(tree.root)
    print(f"In-order: {tree.inorder_traversal()}")
    print(f"Size: {tree.size()}  Height: {tree.height()}")

    print()
    for key in [65, 35]:
        result = tree.search(key)
        print(f"{result.message} ({len(result.path)} comparisons)")

    print()
    for key in [20, 60, 50]:
        result = tree.remove(key)
        detail = f", replaced by {result.replacement}" if result.replacement is not None else ""
        print(f"{result.message} [case: {result.removal_case}{detail}]")

    render(tree.root)
    print(f"In-order: {tree.inorder_traversal()}")

    print("\nSorted inserts build a chain:")
    chain = SearchTree()
    for key in range(1, 8):
        chain.insert(key)
    print(f"Height after inserting 1..7 in order: {chain.height()}")


if __name__ == "__main__":
    main()
