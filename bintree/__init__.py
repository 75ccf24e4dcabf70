"""Parent-linked binary trees: nodes, traversals, metrics and text rendering."""

__version__ = "0.1.0"
__all__ = ["node", "display", "traversal", "metrics"]