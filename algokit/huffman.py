"""Huffman trees and codes built on a frequency-ordered min-heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from algokit.heap import BinaryTreeNode, Heap

# Internal nodes carry no character; they tie-break like the byte 0xFF.
_INTERNAL_RANK = 0xFF


@dataclass(frozen=True)
class Symbol:
    """A character paired with its frequency; ``data`` is None for joins."""

    data: str | None
    freq: int

    def __post_init__(self) -> None:
        if self.data is not None and (
            not isinstance(self.data, str) or len(self.data) != 1
        ):
            raise ValueError(f"symbol data must be one character: {self.data!r}")
        if self.freq <= 0:
            raise ValueError("symbol frequency must be positive")

    @property
    def rank(self) -> int:
        """Ordering key used to break frequency ties."""
        return _INTERNAL_RANK if self.data is None else ord(self.data)


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def compare_freq(a: BinaryTreeNode | None, b: BinaryTreeNode | None) -> int:
    """Order nodes by symbol frequency, then by character."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    s1: Symbol | None = a.data
    s2: Symbol | None = b.data
    f1 = s1.freq if s1 is not None else 0
    f2 = s2.freq if s2 is not None else 0
    if f1 != f2:
        return _sign(f1, f2)
    if s1 is not None and s2 is not None:
        return _sign(s1.rank, s2.rank)
    if s1 is None and s2 is not None:
        return -1
    if s1 is not None and s2 is None:
        return 1
    return 0


def huffman_priority_queue(
    data: Iterable[str], freq: Sequence[int]
) -> Heap[BinaryTreeNode]:
    """Build a min-heap of leaf nodes, one per character."""
    chars = list(data)
    freqs = list(freq)
    if not chars:
        raise ValueError("no symbols given")
    if len(chars) != len(freqs):
        raise ValueError("data and frequencies differ in length")
    queue: Heap[BinaryTreeNode] = Heap(compare_freq)
    for char, count in zip(chars, freqs):
        queue.insert(BinaryTreeNode(Symbol(char, count)))
    return queue


def huffman_extract_and_insert(queue: Heap[BinaryTreeNode]) -> None:
    """Join the two least frequent nodes under a new parent node."""
    if len(queue) < 2:
        raise ValueError("need at least two nodes to combine")
    left = queue.extract()
    right = queue.extract()
    parent = BinaryTreeNode(
        Symbol(None, left.data.freq + right.data.freq), left=left, right=right
    )
    left.parent = parent
    right.parent = parent
    queue.insert(parent)


def huffman_tree(data: Iterable[str], freq: Sequence[int]) -> BinaryTreeNode:
    """Build the Huffman tree and return its root."""
    queue = huffman_priority_queue(data, freq)
    while len(queue) > 1:
        huffman_extract_and_insert(queue)
    return queue.extract()


def _codes(node: BinaryTreeNode | None, path: str) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    if node.is_leaf:
        symbol: Symbol = node.data
        if symbol.data is not None:
            yield symbol.data, path or "0"
        return
    yield from _codes(node.left, path + "0")
    yield from _codes(node.right, path + "1")


def huffman_codes(data: Iterable[str], freq: Sequence[int]) -> dict[str, str]:
    """Map each character to its Huffman code, in tree order, left first."""
    return dict(_codes(huffman_tree(data, freq), ""))