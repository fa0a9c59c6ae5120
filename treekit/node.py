"""The binary tree node shared by every tree in the package."""

from __future__ import annotations


class Node:
    """A binary tree node holding an integer and links to its relatives.

    Creating a node does not attach it to ``parent``; the caller links it
    into ``parent.left`` or ``parent.right`` as needed.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves under it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves under it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None or self.parent.parent is None:
            return None
        return self.parent.sibling()

    def detach(self) -> Node:
        """Cut this node and its subtree away from its parent and return it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
            self.parent = None
        return self