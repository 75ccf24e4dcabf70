"""Sideways text rendering of a binary tree."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO, Tuple

from bintree.node import BinaryTreeNode

INDENT = 10


def _reverse_inorder(tree: Optional[BinaryTreeNode]) -> Iterator[Tuple[int, int]]:
    """Yield (depth, value) pairs right subtree first, then node, then left."""
    stack = []
    node, level = tree, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, level))
            node, level = node.right, level + 1
        node, level = stack.pop()
        yield level, node.value
        node, level = node.left, level + 1


def render(tree: Optional[BinaryTreeNode]) -> str:
    """Return the tree drawn sideways: root at the left, right subtree on top."""
    return "".join(
        f"\n{' ' * (INDENT * level)}({value})\n"
        for level, value in _reverse_inorder(tree)
    )


def print_tree(tree: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the rendering of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))