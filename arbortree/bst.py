"""Binary search trees holding distinct integer values."""

from __future__ import annotations

from typing import Iterable, Iterator

from arbortree.metrics import size
from arbortree.node import Node
from arbortree.traversal import inorder


def is_bst(tree: Node | None) -> bool:
    """Return True if the tree is a valid binary search tree.

    Every value in a left subtree must be strictly smaller and every value
    in a right subtree strictly larger than the node above it.
    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree of distinct values, rooted at ``root``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build a tree by inserting the values in order, skipping repeats."""
        self.root: Node | None = None
        for value in dict.fromkeys(values):
            self.insert(value)

    def __len__(self) -> int:
        return size(self.root)

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __contains__(self, value: object) -> bool:
        return self.search(value) is not None  # type: ignore[arg-type]

    def insert(self, value: int) -> Node:
        """Insert a value and return its new node.

        Raises ValueError if the value is already in the tree.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                raise ValueError(f"{value!r} is already in the tree")

    def search(self, value: int) -> Node | None:
        """Return the node holding the value, or None if it is absent."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def remove(self, value: int) -> None:
        """Remove a value from the tree.

        A node with two children takes the value of its in-order successor,
        which is removed in its place. Raises ValueError if the value is absent.
        """
        node = self.search(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the tree")
        self._unlink(node)

    def _unlink(self, node: Node) -> Node | None:
        """Remove a node and return the parent of the node spliced out."""
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        return parent