# bintree

A small library for plain binary trees of integers. Every node knows its
parent and its two children, so you can walk down from a root or up from
any node.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes 402's place; 402 becomes 128's right child
```

`Node(value, parent=None, left=None, right=None)` is a dataclass. If you
create a node with a `parent`, it only records that parent. The node is not
attached to it. To link the node into the tree, assign it to the parent's
`left` or `right`, or use the insert methods.

`insert_left` and `insert_right` create the new node, put it directly under
the parent and return it. A child that was already there moves down one
level and stays on the same side.

Each node can answer questions about where it sits:

- `is_leaf()`: true when the node has no children
- `is_root()`: true when the node has no parent
- `depth()`: how many edges lie between the node and its root
- `sibling()`: the other child of the node's parent, or `None`
- `uncle()`: the sibling of the node's parent, or `None`
- `detach()`: cuts the node and its subtree off from the parent, so the node becomes a root

## Traversals

`bintree.traversal` has `preorder`, `inorder` and `postorder`. Each one takes
a tree, which may be `None`, and yields the values it holds in the chosen
order. They use an explicit stack rather than recursion, so deep trees do not
run into Python's recursion limit.

```python
from bintree.traversal import inorder

print(list(inorder(root)))
```

## Metrics

`bintree.metrics` measures the shape of a tree. Every function also accepts
`None`.

- `height(tree)`: the number of edges on the longest path from the root down to a leaf; 0 for a single node or `None`
- `size(tree)`: the number of nodes
- `leaves(tree)`: the number of nodes with no children
- `internal_nodes(tree)`: the number of nodes with at least one child
- `balance(tree)`: the number of levels in the left subtree minus the number of levels in the right subtree. A missing subtree counts as 0 levels and a single node counts as 1. Returns 0 for `None`.
- `is_full(tree)`: true when every node has either zero or two children; false for `None`
- `is_perfect(tree)`: true when every node has either zero or two children and all the leaves are at the same depth; false for `None`

## Printing

`bintree.printer.render(tree)` returns an ASCII drawing of a tree, with one
line for each level and each line ending in a newline. Each value is written
as `(%03d)`. Lines of dashes with a `.` mark the connections to the children.
For `None` it returns an empty string.

`print_tree(tree, file=None)` writes that drawing to an open text file. If no
file is given, it writes to standard output.

```python
import sys
from bintree.printer import print_tree

print_tree(root, sys.stdout)
```

## What it does not do

`bintree` is a library only. It has no command-line program. It keeps no
ordering among the values, so it offers no search-tree insertion or
rebalancing.