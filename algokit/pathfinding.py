"""Path searches over character grids and weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Union

from algokit.graphs import Graph, Vertex

Report = Callable[[str], object]
VertexRef = Union[Vertex, str]

# Right, down, left, up: the order in which grid neighbours are tried.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass(frozen=True)
class Point:
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


def _as_point(value: Point | Iterable[int]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


def _emit(report: Report | None, message: str) -> None:
    if report is not None:
        report(message)


def backtracking_array(
    grid: Sequence[str],
    start: Point | Iterable[int],
    target: Point | Iterable[int],
    report: Report | None = None,
) -> list[Point] | None:
    """Find the first path through ``grid`` by backtracking.

    Cells holding ``'0'`` are open; anything else is a wall. Neighbours are
    tried right, down, left, then up. ``report`` receives one line per cell
    checked. Returns the points from ``start`` to ``target``, or None when
    no path exists. Raises ValueError for an empty or ragged grid.
    """
    rows = len(grid)
    if rows == 0:
        raise ValueError("grid has no rows")
    cols = len(grid[0])
    if cols == 0:
        raise ValueError("grid has no columns")
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows differ in length")

    begin = _as_point(start)
    goal = _as_point(target)
    visited: set[Point] = set()

    def enter(point: Point) -> bool:
        if not (0 <= point.x < cols and 0 <= point.y < rows):
            return False
        if grid[point.y][point.x] != "0" or point in visited:
            return False
        _emit(report, f"Checking coordinates [{point.x}, {point.y}]")
        visited.add(point)
        return True

    if not enter(begin):
        return None
    if begin == goal:
        return [begin]

    stack: list[list] = [[begin, 0]]
    while stack:
        frame = stack[-1]
        point, tried = frame
        if tried == len(_DIRECTIONS):
            stack.pop()
            continue
        frame[1] = tried + 1
        dx, dy = _DIRECTIONS[tried]
        neighbour = Point(point.x + dx, point.y + dy)
        if not enter(neighbour):
            continue
        stack.append([neighbour, 0])
        if neighbour == goal:
            return [entry[0] for entry in stack]
    return None


def _resolve(graph: Graph, ref: VertexRef) -> Vertex:
    if isinstance(ref, Vertex):
        if ref.content not in graph or graph.vertex(ref.content) is not ref:
            raise ValueError(f"vertex {ref.content!r} is not in this graph")
        return ref
    return graph.vertex(ref)


def backtracking_graph(
    graph: Graph,
    start: VertexRef,
    target: VertexRef,
    report: Report | None = None,
) -> list[str] | None:
    """Find the first path between two vertices by depth-first backtracking.

    Edges are followed in the order they were added. ``report`` receives one
    line per vertex checked. Returns the vertex names from ``start`` to
    ``target``, or None when ``target`` cannot be reached.
    """
    begin = _resolve(graph, start)
    goal = _resolve(graph, target)
    visited: set[int] = set()

    def enter(vertex: Vertex) -> bool:
        if vertex.index in visited:
            return False
        _emit(report, f"Checking {vertex.content}")
        visited.add(vertex.index)
        return True

    enter(begin)
    if begin is goal:
        return [begin.content]

    stack = [(begin, iter(begin.edges))]
    while stack:
        _, edges = stack[-1]
        for edge in edges:
            if enter(edge.dest):
                stack.append((edge.dest, iter(edge.dest.edges)))
                if edge.dest is goal:
                    return [vertex.content for vertex, _ in stack]
                break
        else:
            stack.pop()
    return None


def dijkstra_graph(
    graph: Graph,
    start: VertexRef,
    target: VertexRef,
    report: Report | None = None,
) -> list[str] | None:
    """Find the lightest path between two vertices with Dijkstra's algorithm.

    Among vertices at the same distance the one added first is settled
    first. ``report`` receives one line per vertex settled, giving its
    distance from ``start``. Returns the vertex names from ``start`` to
    ``target``, or None when ``target`` cannot be reached.
    """
    begin = _resolve(graph, start)
    goal = _resolve(graph, target)
    vertices = list(graph)

    dist: dict[int, int] = {begin.index: 0}
    parent: dict[int, int] = {}
    used: set[int] = set()

    while True:
        pending = [
            (distance, index)
            for index, distance in dist.items()
            if index not in used
        ]
        if not pending:
            break
        current, index = min(pending)
        vertex = vertices[index]
        _emit(
            report,
            f"Checking {vertex.content}, distance from {begin.content} "
            f"is {current}",
        )
        used.add(index)
        if index == goal.index:
            break
        for edge in vertex.edges:
            dest = edge.dest.index
            if dest in used:
                continue
            candidate = current + edge.weight
            if dest not in dist or candidate < dist[dest]:
                dist[dest] = candidate
                parent[dest] = index

    if goal.index not in used:
        return None

    path: list[str] = []
    index: int | None = goal.index
    while index is not None:
        path.append(vertices[index].content)
        index = parent.get(index)
    path.reverse()
    return path