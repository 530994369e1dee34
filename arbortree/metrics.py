"""Measurements and shape predicates for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from arbortree.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Node | None) -> int:
    """Number of levels in the tree: 0 for an empty tree, 1 for a lone node."""
    count = 0
    layer = [tree] if tree is not None else []
    while layer:
        count += 1
        layer = [c for n in layer for c in (n.left, n.right) if c is not None]
    return count


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    return max(_levels(tree) - 1, 0)


def depth(node: Node | None) -> int:
    """Return the number of edges from the node up to its root; 0 if None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if every inner node has two children and all leaves share a level."""
    if tree is None:
        return False
    layer = [tree]
    while layer:
        saw_leaf = saw_inner = False
        next_layer: list[Node] = []
        for node in layer:
            if node.is_leaf():
                saw_leaf = True
            elif node.left is None or node.right is None:
                return False
            else:
                saw_inner = True
                next_layer.extend((node.left, node.right))
        if saw_leaf and saw_inner:
            return False
        layer = next_layer
    return True


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is filled except possibly the last, packed left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True