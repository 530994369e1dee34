"""Max binary heaps stored as complete linked binary trees."""

from __future__ import annotations

from typing import Iterable

from arbortree.metrics import is_complete
from arbortree.node import Node


def is_heap(tree: Node | None) -> bool:
    """Return True if the tree is complete and no child exceeds its parent.

    An empty tree is not a heap.
    """
    if not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.value > node.value:
                    return False
                stack.append(child)
    return True


class MaxHeap:
    """A max binary heap whose largest value sits at ``root``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build a heap by inserting the values in order."""
        self.root: Node | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._count

    def _node_at(self, position: int) -> Node:
        """Return the node at a 1-based level-order position."""
        node = self.root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert a value and return the node where it comes to rest."""
        self._count += 1
        if self.root is None:
            self.root = Node(value)
            return self.root
        parent = self._node_at(self._count // 2)
        node = Node(value, parent)
        if self._count % 2:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        last = self._node_at(self._count)
        self._count -= 1
        if last is self.root:
            self.root = None
            return top
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self.root.value = last.value
        node = self.root
        while node.left is not None:
            child = node.left
            if node.right is not None and node.right.value > child.value:
                child = node.right
            if child.value <= node.value:
                break
            node.value, child.value = child.value, node.value
            node = child
        return top

    def to_sorted_list(self) -> list[int]:
        """Empty the heap, returning its values in descending order."""
        return [self.extract() for _ in range(len(self))]