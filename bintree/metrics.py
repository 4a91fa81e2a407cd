"""Structural measurements of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from bintree.node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _nodes_with_depth(tree: Optional[Node]) -> Iterator[tuple[Node, int]]:
    queue = deque([(tree, 0)] if tree is not None else [])
    while queue:
        node, level = queue.popleft()
        yield node, level
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))


def _levels(tree: Optional[Node]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    return max((level + 1 for _, level in _nodes_with_depth(tree)), default=0)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the level count of the left subtree minus that of the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves share one depth."""
    if tree is None:
        return False
    leaf_depth = 0
    node = tree
    while not node.is_leaf():
        node = node.left if node.left is not None else node.right
        leaf_depth += 1
    for node, level in _nodes_with_depth(tree):
        if node.is_leaf():
            if level != leaf_depth:
                return False
        elif node.left is None or node.right is None:
            return False
    return True