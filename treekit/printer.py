"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from treekit.node import Node


def _put(rows: list[list[str]], depth: int, start: int, text: str) -> None:
    while len(rows) <= depth:
        rows.append([])
    row = rows[depth]
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _draw(node: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, rows)
    right = _draw(node.right, offset + left + width, depth + 1, rows)
    _put(rows, depth, offset + left, label)
    if depth:
        if is_left:
            _put(rows, depth - 1, offset + left + width // 2, "-" * (width + right))
        else:
            _put(rows, depth - 1, offset - width // 2, "-" * (left + width))
        _put(rows, depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of ``tree``; an empty tree draws as an empty string."""
    if tree is None:
        return ""
    rows: list[list[str]] = []
    _draw(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))