"""Binary tree node with parent links and structural queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node only records its parent. It does not attach the node to
    that parent. Use :meth:`insert_left` or :meth:`insert_right`, or assign
    ``left``/``right`` on the parent, to link it into the tree.
    """

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def insert_left(self, value: int) -> "Node":
        """Insert a new left child, pushing any existing one down to its left."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> "Node":
        """Insert a new right child, pushing any existing one down to its right."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def detach(self) -> None:
        """Remove this subtree from its parent, leaving this node as a root."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        self.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _ancestors(self) -> Iterator["Node"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Return the number of edges between this node and its root."""
        return sum(1 for _ in self._ancestors())

    def sibling(self) -> Optional["Node"]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional["Node"]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()