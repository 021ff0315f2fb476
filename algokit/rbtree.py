"""Red-black trees of integers: insertion, validation and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

from algokit.treeprint import render_binary_tree


class Color(IntEnum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2


class RBNode:
    """A red-black tree node holding the integer ``n``."""

    def __init__(
        self, n: int, color: Color, parent: RBNode | None = None
    ) -> None:
        self.n = n
        self.color = Color(color)
        self.parent = parent
        self.left: RBNode | None = None
        self.right: RBNode | None = None

    def __repr__(self) -> str:
        return f"RBNode(n={self.n}, color={self.color.name})"


def _black_height(node: RBNode | None, low: int | None, high: int | None) -> int | None:
    """Black height of a valid subtree, or None when it breaks a rule."""
    if node is None:
        return 1
    if (low is not None and node.n < low) or (high is not None and node.n > high):
        return None
    if node.color not in (Color.RED, Color.BLACK):
        return None
    if node.color is Color.RED and any(
        other is not None and other.color is Color.RED
        for other in (node.parent, node.left, node.right)
    ):
        return None
    left = _black_height(node.left, low, node.n - 1)
    if left is None:
        return None
    right = _black_height(node.right, node.n + 1, high)
    if right is None or left != right:
        return None
    return left + (node.color is Color.BLACK)


def is_valid_rb(node: RBNode | None) -> bool:
    """Whether the tree under ``node`` satisfies every red-black rule."""
    if node is None:
        return True
    if node.color is not Color.BLACK:
        return False
    return _black_height(node, None, None) is not None


@dataclass(eq=False)
class _View:
    data: RBNode
    left: _View | None = None
    right: _View | None = None


def _view(node: RBNode | None) -> _View | None:
    if node is None:
        return None
    return _View(node, _view(node.left), _view(node.right))


def _label(node: RBNode) -> str:
    mark = "R" if node.color is Color.RED else "B"
    return f"{mark}({node.n:03d})"


def render_rb(node: RBNode | None) -> str:
    """Draw the tree under ``node`` with labels such as ``B(098)``."""
    return render_binary_tree(_view(node), _label)


class RBTree:
    """A self-balancing binary search tree of distinct integers."""

    def __init__(self) -> None:
        self.root: RBNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.n
            node = node.right

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.n:
                return True
            node = node.left if value < node.n else node.right  # type: ignore[operator]
        return False

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> RBTree:
        """Build a tree from ``values``, silently skipping duplicates."""
        tree = cls()
        for value in values:
            try:
                tree.insert(value)
            except ValueError:
                continue
        return tree

    def insert(self, value: int) -> RBNode:
        """Insert ``value`` and return its node; raise ValueError on a duplicate."""
        parent: RBNode | None = None
        current = self.root
        while current is not None:
            parent = current
            if value < current.n:
                current = current.left
            elif value > current.n:
                current = current.right
            else:
                raise ValueError(f"{value} is already in the tree")
        node = RBNode(value, Color.RED, parent)
        if parent is None:
            self.root = node
        elif value < parent.n:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._rebalance(node)
        return node

    def is_valid(self) -> bool:
        """Whether the tree satisfies every red-black rule."""
        return is_valid_rb(self.root)

    def render(self) -> str:
        """Draw the tree as text."""
        return render_rb(self.root)

    def _replace_child(self, old: RBNode, new: RBNode) -> None:
        new.parent = old.parent
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, y: RBNode) -> None:
        x = y.left
        assert x is not None
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        self._replace_child(y, x)
        x.right = y
        y.parent = x

    def _rebalance(self, z: RBNode) -> None:
        while z is not self.root and z.parent.color is Color.RED:
            parent = z.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(parent)
                    parent = z.parent
                    grand = parent.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(parent)
                    parent = z.parent
                    grand = parent.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        self.root.color = Color.BLACK