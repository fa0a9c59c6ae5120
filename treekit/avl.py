"""AVL trees: height-balanced binary search trees of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from treekit.bst import BinarySearchTree, is_bst
from treekit.metrics import balance
from treekit.node import Node
from treekit.rotation import rotate_left, rotate_right


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def is_avl(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid AVL tree.

    The tree must be a binary search tree of distinct values, and at every
    node the heights of the two subtrees may differ by at most one.
    An empty tree is not an AVL tree.
    """
    if tree is None or not is_bst(tree):
        return False
    return all(abs(balance(node)) <= 1 for node in _walk(tree))


def _rebalance(node: Node | None) -> Node | None:
    """Rebalance bottom-up with single rotations; return the subtree's root."""
    if node is None or node.is_leaf():
        return node
    _rebalance(node.left)
    _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


class AVLTree(BinarySearchTree):
    """A self-balancing binary search tree holding distinct integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        """Build the tree by inserting ``values`` in order, skipping duplicates."""
        super().__init__(values)

    def __len__(self) -> int:
        return super().__len__()

    def search(self, value: int) -> Node | None:
        """Return the node holding ``value``, or None if it is absent."""
        return super().search(value)

    def insert(self, value: int) -> Node:
        """Insert ``value``, rebalance, and return the node that holds it.

        Raises ValueError if ``value`` is already in the tree.
        """
        node = super().insert(value)
        ancestor = node.parent
        while ancestor is not None:
            factor = balance(ancestor)
            if factor > 1:
                assert ancestor.left is not None
                if value > ancestor.left.value:
                    rotate_left(ancestor.left)
                ancestor = rotate_right(ancestor)
            elif factor < -1:
                assert ancestor.right is not None
                if value < ancestor.right.value:
                    rotate_right(ancestor.right)
                ancestor = rotate_left(ancestor)
            if ancestor.parent is None:
                self.root = ancestor
            ancestor = ancestor.parent
        return node

    def remove(self, value: int) -> None:
        """Remove ``value`` and rebalance; an absent value leaves the tree as is."""
        before = len(self)
        super().remove(value)
        if len(self) != before and self.root is not None:
            self.root = _rebalance(self.root)


def sorted_to_avl(values: Sequence[int]) -> Node | None:
    """Build an AVL tree from ascending ``values`` and return its root.

    The middle element (the lower one for an even count) becomes the root
    of each subtree. An empty sequence gives None.
    """

    def build(low: int, high: int, parent: Node | None) -> Node | None:
        if low >= high:
            return None
        middle = low + (high - low - 1) // 2
        node = Node(values[middle], parent)
        node.left = build(low, middle, node)
        node.right = build(middle + 1, high, node)
        return node

    return build(0, len(values), None)