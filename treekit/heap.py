"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from treekit.metrics import is_complete
from treekit.node import Node


def _ordered(node: Node) -> bool:
    return all(
        child is None or (child.value <= node.value and _ordered(child))
        for child in (node.left, node.right)
    )


def is_heap(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid max binary heap.

    The tree must be complete, and no child may hold a value greater than
    its parent's. An empty tree is not a heap.
    """
    return tree is not None and is_complete(tree) and _ordered(tree)


def _swap(a: Node, b: Node) -> Node:
    a.value, b.value = b.value, a.value
    return b


class MaxHeap:
    """A max binary heap of integers kept as a complete binary tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build the heap by inserting ``values`` in order."""
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def _node_at(self, index: int) -> Node:
        """Return the node at 1-based level-order ``index``."""
        node = self.root
        for bit in bin(index)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node that ends up holding it."""
        index = self._size + 1
        if self.root is None:
            node = self.root = Node(value)
        else:
            parent = self._node_at(index // 2)
            node = Node(value, parent)
            if index % 2:
                parent.right = node
            else:
                parent.left = node
        self._size = index
        while node.parent is not None and node.value > node.parent.value:
            node = _swap(node, node.parent)
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        value = self.root.value
        last = self._node_at(self._size)
        self._size -= 1
        if last is self.root:
            self.root = None
            return value
        self.root.value = last.value
        last.detach()
        node = self.root
        while node.left is not None:
            right = node.right
            child = node.left if right is None or node.left.value > right.value else right
            if node.value > child.value:
                break
            node = _swap(node, child)
        return value

    def drain_sorted(self) -> list[int]:
        """Extract every value, emptying the heap; return them largest first."""
        return [self.extract() for _ in range(self._size)]