"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from arbortree.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree first, then node, then right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values left subtree first, then right subtree, then node."""
    stack = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)