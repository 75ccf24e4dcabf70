"""Depth-first traversals of a binary tree, yielding node values."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import BinaryTreeNode


def preorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[BinaryTreeNode] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[BinaryTreeNode]) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    stack = [(tree, False)] if tree is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))