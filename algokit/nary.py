"""N-ary trees whose nodes hold strings."""

from __future__ import annotations

from typing import Callable, Iterator, Sequence


class NaryTree:
    """A node of an N-ary tree.

    Children are kept newest first: a node inserted under a parent becomes
    its first child. ``len()`` and iteration cover the direct children.
    """

    def __init__(self, content: str, parent: NaryTree | None = None) -> None:
        if not isinstance(content, str):
            raise TypeError("node content must be a string")
        self.content = content
        self.parent = parent
        self.children: list[NaryTree] = []
        if parent is not None:
            parent.children.insert(0, self)

    def insert(self, content: str) -> NaryTree:
        """Create a child holding ``content`` and put it first."""
        return NaryTree(content, self)

    @property
    def nb_children(self) -> int:
        """Number of direct children."""
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[NaryTree]:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"NaryTree({self.content!r}, nb_children={self.nb_children})"

    def traverse(self, action: Callable[[NaryTree, int], object]) -> int:
        """Call ``action(node, depth)`` on each node, parents first.

        Returns the greatest depth reached; this node is at depth 0.
        """
        if action is None or not callable(action):
            raise TypeError("a callable action is required")
        max_depth = 0
        stack: list[tuple[NaryTree, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            action(node, depth)
            max_depth = max(max_depth, depth)
            stack.extend((child, depth + 1) for child in reversed(node.children))
        return max_depth

    def height(self) -> int:
        """Number of nodes on the longest path down from this node."""
        best = 0
        stack: list[tuple[NaryTree, int]] = [(self, 1)]
        while stack:
            node, count = stack.pop()
            best = max(best, count)
            stack.extend((child, count + 1) for child in node.children)
        return best

    def diameter(self) -> int:
        """Nodes on the longest path passing through this node."""
        first = second = 0
        for child in self.children:
            height = child.height()
            if height > first:
                first, second = height, first
            elif height > second:
                second = height
        if first and second:
            return first + second + 1
        if first:
            return first + 1
        return 1

    def path_exists(self, path: Sequence[str]) -> bool:
        """Whether ``path`` names this node and then a chain of descendants.

        At each level the first child with a matching name is followed.
        """
        names = list(path)
        if not names or names[0] != self.content:
            return False
        node = self
        for name in names[1:]:
            match = next((c for c in node.children if c.content == name), None)
            if match is None:
                return False
            node = match
        return True