"""ASCII drawing of a binary tree, one text line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .measure import height
from .nodes import Node


class _Canvas:
    """Rows of characters that grow as cells are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def write(self, row: int, col: int, text: str) -> None:
        for i, char in enumerate(text):
            self.put(row, col + i, char)

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _draw(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw node's subtree starting at offset and return its width."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    canvas.write(depth, offset + left, label)
    if depth:
        above = depth - 1
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        canvas.write(above, start, "-" * length)
        canvas.put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree as text, without a trailing newline."""
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "\n".join(canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    out.write(render(tree) + "\n")