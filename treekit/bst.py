"""Binary search trees of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable

from treekit.node import Node


def is_bst(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid binary search tree.

    Every value in a left subtree must be strictly smaller than its ancestor
    and every value in a right subtree strictly greater, so duplicates fail.
    An empty tree is not a binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """An unbalanced binary search tree holding distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build the tree by inserting ``values`` in order, skipping duplicates."""
        self.root: Node | None = None
        self._size = 0
        for value in values:
            if value not in self:
                self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return its new node.

        Raises ValueError if ``value`` is already in the tree.
        """
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        current = self.root
        while True:
            if value == current.value:
                raise ValueError(f"{value} is already in the tree")
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, current)
                    self._size += 1
                    return current.left
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value, current)
                    self._size += 1
                    return current.right
                current = current.right

    def search(self, value: int) -> Node | None:
        """Return the node holding ``value``, or None if it is absent."""
        current = self.root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def remove(self, value: int) -> None:
        """Remove ``value`` from the tree; an absent value leaves it unchanged.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree in its place.
        """
        node = self.search(value)
        if node is None:
            return
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
        self._size -= 1