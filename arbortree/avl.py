"""Self-balancing AVL trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from arbortree.bst import BinarySearchTree, is_bst
from arbortree.metrics import balance
from arbortree.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(c for c in (node.left, node.right) if c is not None)


def is_avl(tree: Node | None) -> bool:
    """Return True if the tree is a binary search tree balanced at every node.

    An empty tree is not an AVL tree.
    """
    if not is_bst(tree):
        return False
    return all(abs(balance(node)) <= 1 for node in _nodes(tree))


def _restore(node: Node) -> Node:
    """Rebalance one node by rotation and return the subtree's root."""
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            node.left.rotate_left()
        return node.rotate_right()
    if factor < -1:
        if balance(node.right) > 0:
            node.right.rotate_right()
        return node.rotate_left()
    return node


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced after every change."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build a tree by inserting the values in order, skipping repeats."""
        super().__init__(values)

    def insert(self, value: int) -> Node:
        """Insert a value, rebalance, and return the node holding it.

        Raises ValueError if the value is already in the tree.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        self.root, new = self._insert(self.root, None, value)
        return new

    def _insert(
        self, node: Node | None, parent: Node | None, value: int
    ) -> tuple[Node, Node]:
        if node is None:
            new = Node(value, parent)
            return new, new
        if value < node.value:
            node.left, new = self._insert(node.left, node, value)
        elif value > node.value:
            node.right, new = self._insert(node.right, node, value)
        else:
            raise ValueError(f"{value!r} is already in the tree")
        return _restore(node), new

    def remove(self, value: int) -> None:
        """Remove a value and rebalance; a value not in the tree is ignored."""
        node = self.search(value)
        if node is None:
            return
        current = self._unlink(node)
        while current is not None:
            current = _restore(current)
            if current.parent is None:
                self.root = current
            current = current.parent

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a balanced tree from values already in ascending order."""
        items = list(values)

        def build(parent: Node | None, begin: int, last: int) -> Node | None:
            if begin > last:
                return None
            mid = (begin + last) // 2
            node = Node(items[mid], parent)
            node.left = build(node, begin, mid - 1)
            node.right = build(node, mid + 1, last)
            return node

        tree = cls()
        tree.root = build(None, 0, len(items) - 1)
        return tree