# bintree

A small library of binary tree nodes that hold integer values. Each node links
to its parent and to its two children. The library covers insertion, queries on
a single node, depth-first traversals, measurements and a sideways text
rendering.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.node import BinaryTreeNode

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 goes between root and 402
```

`BinaryTreeNode(value, parent=None)` records its parent but does not attach
itself to it. To attach it, assign it to `parent.left` or `parent.right`, or use
`insert_left` and `insert_right`, which create the node and attach it.

`insert_left(value)` and `insert_right(value)` return the new node. If the
parent already had a child on that side, the new node goes between them and the
old child becomes a child of the new node on the same side.

A node has the attributes `value`, `parent`, `left` and `right`, and these
queries:

- `is_leaf()`: the node has no children.
- `is_root()`: the node has no parent.
- `sibling()`: the other child of the parent, or `None`.
- `uncle()`: the sibling of the parent, or `None`.

`bintree.node.delete(tree)` detaches `tree` from its parent, if it has one, and
clears the parent and child links of every node in the subtree. `delete(None)`
does nothing.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))    # node, left subtree, right subtree
list(inorder(root))     # left subtree, node, right subtree
list(postorder(root))   # left subtree, right subtree, node
```

Each traversal is a generator of node values. An empty tree (`None`) yields
nothing. None of them uses recursion, so deep trees do not hit the recursion
limit.

## Metrics

```python
from bintree import metrics

metrics.height(root)          # edges on the longest downward path
metrics.depth(node)           # edges up to the root
metrics.size(root)            # number of nodes
metrics.leaves(root)          # nodes with no children
metrics.internal_nodes(root)  # nodes with at least one child
metrics.balance(root)         # levels in the left subtree minus levels in the right
metrics.is_full(root)         # every node has zero or two children
metrics.is_perfect(root)      # every inner node has two children, all leaves on one level
```

All of these accept `None` and return `0` or `False` for it. `height` and
`depth` are also `0` for a single leaf and for a root.

`balance` counts levels, so a missing subtree counts as 0 and a single leaf as
1. `is_perfect` takes the level of the leftmost leaf as the level every leaf
must be on.

## Rendering

```python
from bintree.display import render, print_tree

text = render(root)
print_tree(root)               # writes to sys.stdout
print_tree(root, file=handle)  # or to any text file object
```

The tree is drawn on its side. The root is at the left edge, right subtrees are
above and left subtrees are below, and each level is indented ten more columns
(`bintree.display.INDENT`). Each value is written as `(value)` on its own line,
preceded by a newline, so there is a blank line between entries. An empty tree
renders as an empty string.

## What it does not do

The package is a library only. It has no command-line program, does not keep
trees sorted or balanced, and does not save or load trees.