"""Depth-first and breadth-first walks over a binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from treekit.node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree``: node first, then left and right subtrees."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree``: left subtree, node, then right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree``: left and right subtrees, then the node."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of ``tree`` level by level, left to right."""
    if tree is None:
        return
    queue: deque[Node] = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)