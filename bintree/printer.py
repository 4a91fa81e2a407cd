"""Text rendering of a binary tree with connector lines between levels."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node

_MIN_ROW_WIDTH = 255


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows = [[" "] * _MIN_ROW_WIDTH for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        result = []
        for line in self._rows:
            text = "".join(line)
            result.append(text[:2] + text[2:].rstrip(" "))
        return result


def _draw(
    node: Optional[Node], offset: int, depth: int, is_left: bool, canvas: _Canvas
) -> int:
    if node is None:
        return 0
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, True, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, False, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            for i in range(width + right):
                canvas.put(depth - 1, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                canvas.put(depth - 1, offset - width // 2 + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def _height(node: Node) -> int:
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        for child in (current.left, current.right):
            if child is not None:
                stack.append((child, level + 1))
    return deepest


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one line per level; empty if no tree."""
    if tree is None:
        return ""
    canvas = _Canvas(_height(tree) + 1)
    _draw(tree, 0, 0, False, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))