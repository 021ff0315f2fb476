"""Depth-first and breadth-first walks over a graph."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterator

from algokit.graphs import Edge, Graph, Vertex

Action = Callable[[Vertex, int], object]


def _require_action(action: Action | None) -> None:
    if action is None or not callable(action):
        raise TypeError("a callable action is required")


def depth_first_traverse(graph: Graph, action: Action) -> int:
    """Visit vertices depth first from the first vertex added.

    ``action(vertex, depth)`` is called once per reachable vertex, in the
    order the vertices are reached. Returns the greatest depth seen, or 0
    for an empty graph.
    """
    _require_action(action)
    start = graph.first
    if start is None:
        return 0

    visited = {start.index}
    action(start, 0)
    max_depth = 0
    stack: list[tuple[Iterator[Edge], int]] = [(iter(start.edges), 0)]
    while stack:
        edges, depth = stack[-1]
        for edge in edges:
            vertex = edge.dest
            if vertex.index in visited:
                continue
            visited.add(vertex.index)
            action(vertex, depth + 1)
            max_depth = max(max_depth, depth + 1)
            stack.append((iter(vertex.edges), depth + 1))
            break
        else:
            stack.pop()
    return max_depth


def breadth_first_traverse(graph: Graph, action: Action) -> int:
    """Visit vertices breadth first from the first vertex added.

    ``action(vertex, depth)`` is called once per reachable vertex, nearest
    first. Returns the greatest depth seen, or 0 for an empty graph.
    """
    _require_action(action)
    start = graph.first
    if start is None:
        return 0

    visited = {start.index}
    queue: deque[tuple[Vertex, int]] = deque([(start, 0)])
    max_depth = 0
    while queue:
        vertex, depth = queue.popleft()
        action(vertex, depth)
        max_depth = max(max_depth, depth)
        for neighbour in vertex.neighbours:
            if neighbour.index not in visited:
                visited.add(neighbour.index)
                queue.append((neighbour, depth + 1))
    return max_depth