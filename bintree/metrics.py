"""Measurements and shape checks of a binary tree."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import BinaryTreeNode


def _nodes(tree: Optional[BinaryTreeNode]) -> Iterator[BinaryTreeNode]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Optional[BinaryTreeNode]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    levels = 0
    frontier = [tree] if tree is not None else []
    while frontier:
        levels += 1
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def height(tree: Optional[BinaryTreeNode]) -> int:
    """Edges on the longest downward path from ``tree``; 0 for a leaf or None."""
    return max(_levels(tree) - 1, 0)


def depth(node: Optional[BinaryTreeNode]) -> int:
    """Edges from ``node`` up to its root; 0 for a root or None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[BinaryTreeNode]) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[BinaryTreeNode]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[BinaryTreeNode]) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[BinaryTreeNode]) -> int:
    """Levels of the left subtree minus levels of the right; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[BinaryTreeNode]) -> bool:
    """True if every node has zero or two children; False for None."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _nodes(tree)
    )


def is_perfect(tree: Optional[BinaryTreeNode]) -> bool:
    """True if every inner node has two children and all leaves share a level."""
    if tree is None:
        return False
    leaf_level = 0
    node = tree
    while node.left is not None:
        leaf_level += 1
        node = node.left
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            if level != leaf_level:
                return False
        elif node.left is None or node.right is None:
            return False
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return True