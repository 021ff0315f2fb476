"""Text rendering of binary trees as labelled boxes joined by dashes."""

from __future__ import annotations

from typing import Any, Callable


def _height(node: Any) -> int:
    left = 1 + _height(node.left) if node.left is not None else 0
    right = 1 + _height(node.right) if node.right is not None else 0
    return max(left, right)


def render_binary_tree(root: Any, label: Callable[[Any], str] = str) -> str:
    """Draw the tree under ``root``, one text line per level.

    ``root`` is any node with ``data``, ``left`` and ``right`` attributes;
    ``label`` turns a node's data into its text. An empty tree renders as
    the empty string.
    """
    if root is None:
        return ""

    rows: list[list[str]] = [[] for _ in range(_height(root) + 1)]

    def put(row: int, col: int, char: str) -> None:
        if col < 0:
            return
        cells = rows[row]
        if len(cells) <= col:
            cells.extend(" " * (col + 1 - len(cells)))
        cells[col] = char

    def walk(node: Any, offset: int, depth: int, is_left: bool) -> int:
        if node is None:
            return 0
        text = label(node.data)
        width = len(text)
        left = walk(node.left, offset, depth + 1, True)
        right = walk(node.right, offset + left + width, depth + 1, False)
        for i, char in enumerate(text):
            put(depth, offset + left + i, char)
        if depth:
            if is_left:
                for i in range(width + right):
                    put(depth - 1, offset + left + width // 2 + i, "-")
            else:
                for i in range(left + width):
                    put(depth - 1, offset - width // 2 + i, "-")
            put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    walk(root, 0, 0, False)
    # Trailing blanks are trimmed, but the first two columns always remain.
    lines = ["".join(cells).rstrip().ljust(2) for cells in rows]
    return "\n".join(lines) + "\n"