"""Binary tree nodes with parent links and the operations on a single node."""

from __future__ import annotations

from typing import Optional


class BinaryTreeNode:
    """A node of a binary tree holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right``, or use
    :meth:`insert_left` and :meth:`insert_right`, which do both.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[BinaryTreeNode] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[BinaryTreeNode] = None
        self.right: Optional[BinaryTreeNode] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; any existing left child becomes its left child."""
        new_node = BinaryTreeNode(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; any existing right child becomes its right child."""
        new_node = BinaryTreeNode(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[BinaryTreeNode]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[BinaryTreeNode]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left


def delete(tree: Optional[BinaryTreeNode]) -> None:
    """Take apart the whole tree rooted at ``tree``, unlinking every node.

    If ``tree`` has a parent, it is detached from that parent as well.
    """
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.left = None
        node.right = None
        node.parent = None