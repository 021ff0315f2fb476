"""A binary min-heap ordered by a user supplied comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], int]


@dataclass(eq=False, repr=False)
class BinaryTreeNode:
    """A generic binary tree node holding arbitrary data."""

    data: Any = None
    parent: BinaryTreeNode | None = None
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator[BinaryTreeNode]:
        """Yield the existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"BinaryTreeNode(data={self.data!r})"


class Heap(Generic[T]):
    """A complete binary min-heap.

    ``compare(a, b)`` must return a negative number when ``a`` belongs
    before ``b``, zero when they are equal and a positive number otherwise.
    """

    def __init__(self, compare: Compare) -> None:
        if compare is None or not callable(compare):
            raise TypeError("a comparison function is required")
        self._compare = compare
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def compare(self) -> Compare:
        """The comparison function ordering the heap."""
        return self._compare

    def insert(self, data: T) -> None:
        """Add ``data`` to the heap, bubbling it up into place."""
        if data is None:
            raise ValueError("cannot insert None into a heap")
        items = self._items
        items.append(data)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(items[index], items[parent]) >= 0:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def extract(self) -> T:
        """Remove and return the smallest item; raise IndexError if empty."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._descend(0)
        return top

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    @property
    def root(self) -> BinaryTreeNode | None:
        """A linked tree of nodes mirroring the heap's current shape."""
        if not self._items:
            return None
        nodes = [BinaryTreeNode(item) for item in self._items]
        for index, node in enumerate(nodes[1:], start=1):
            parent = nodes[(index - 1) // 2]
            node.parent = parent
            if index % 2:
                parent.left = node
            else:
                parent.right = node
        return nodes[0]

    def _descend(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._compare(items[left], items[smallest]) < 0:
                smallest = left
            if right < size and self._compare(items[right], items[smallest]) < 0:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest