"""Binary tree nodes with parent links, and operations on their structure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class Node:
    """A binary tree node linked to its parent and its two children.

    Creating a node does not attach it to ``parent``; the parent's child
    links are left for the caller (or the ``insert_*`` methods) to set.
    """

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = None
    right: Node | None = None

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def rotate_left(self) -> Node:
        """Rotate left around this node and return the subtree's new root."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left: node has no right child")
        self.right = pivot.left
        if self.right is not None:
            self.right.parent = self
        pivot.left = self
        self._hand_over_parent(pivot)
        return pivot

    def rotate_right(self) -> Node:
        """Rotate right around this node and return the subtree's new root."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right: node has no left child")
        self.left = pivot.right
        if self.left is not None:
            self.left.parent = self
        pivot.right = self
        self._hand_over_parent(pivot)
        return pivot

    def _hand_over_parent(self, pivot: Node) -> None:
        parent = self.parent
        pivot.parent = parent
        self.parent = pivot
        if parent is not None:
            if parent.left is self:
                parent.left = pivot
            else:
                parent.right = pivot


def _lineage(node: Node | None) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.parent


def common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the lowest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor.
    """
    if first is None or second is None:
        return None
    seen = set(_lineage(first))
    return next((node for node in _lineage(second) if node in seen), None)


def delete_tree(tree: Node | None) -> None:
    """Unlink every node of a tree, detaching it from its parent."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.parent = node.left = node.right = None