"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from treekit.node import Node


def _nodes(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest downward path; 0 for an empty tree."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest path down from ``tree``.

    A single node and an empty tree both have height 0.
    """
    if tree is None:
        return 0
    return _levels(tree) - 1


def depth(node: Node | None) -> int:
    """Return the number of edges between ``node`` and its root."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in ``tree``."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes in ``tree`` without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes in ``tree`` with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the balance factor of ``tree``: left height minus right height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node of ``tree`` has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if ``tree`` is full and all its leaves share one level."""
    if tree is None:
        return False
    left, right = tree.left, tree.right
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return _levels(left) == _levels(right) and is_perfect(left) and is_perfect(right)


def is_complete(tree: Node | None) -> bool:
    """Return True if every level of ``tree`` is filled, the last from the left."""
    if tree is None:
        return False
    total = size(tree)
    stack: list[tuple[Node, int]] = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if index >= total:
            return False
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))
    return True


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes (or either node).

    Returns None if either node is None or they belong to different trees.
    """
    if first is None or second is None:
        return None
    ancestors: set[int] = set()
    node: Node | None = first
    while node is not None:
        ancestors.add(id(node))
        node = node.parent
    node = second
    while node is not None:
        if id(node) in ancestors:
            return node
        node = node.parent
    return None