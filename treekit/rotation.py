"""Left and right rotations of a binary tree."""

from __future__ import annotations

from treekit.node import Node


def _relink_parent(old: Node, new: Node) -> None:
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new
    old.parent = new


def rotate_left(tree: Node | None) -> Node:
    """Rotate ``tree`` to the left and return the new subtree root.

    Raises ValueError if ``tree`` is None or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    _relink_parent(tree, pivot)
    return pivot


def rotate_right(tree: Node | None) -> Node:
    """Rotate ``tree`` to the right and return the new subtree root.

    Raises ValueError if ``tree`` is None or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    _relink_parent(tree, pivot)
    return pivot