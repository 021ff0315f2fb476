"""Directed graphs stored as adjacency lists of named vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator


class EdgeType(IntEnum):
    """How a connection between two vertices is made."""

    UNIDIRECTIONAL = 0
    BIDIRECTIONAL = 1


@dataclass(eq=False, repr=False)
class Edge:
    """A one-way connection to ``dest`` carrying an integer weight."""

    dest: Vertex
    weight: int = 0

    def __repr__(self) -> str:
        return f"Edge(dest={self.dest.content!r}, weight={self.weight})"


@dataclass(eq=False, repr=False)
class Vertex:
    """A named vertex with optional coordinates and its outgoing edges."""

    index: int
    content: str
    x: int = 0
    y: int = 0
    edges: list[Edge] = field(default_factory=list)

    @property
    def nb_edges(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    @property
    def neighbours(self) -> list[Vertex]:
        """Destination vertices, in the order the edges were added."""
        return [edge.dest for edge in self.edges]

    def __repr__(self) -> str:
        return (
            f"Vertex(index={self.index}, content={self.content!r}, "
            f"x={self.x}, y={self.y}, nb_edges={self.nb_edges})"
        )


class Graph:
    """A graph whose vertices keep the order in which they were added."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._by_name: dict[str, Vertex] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def nb_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._vertices)

    @property
    def first(self) -> Vertex | None:
        """The first vertex added, or None for an empty graph."""
        return self._vertices[0] if self._vertices else None

    def vertex(self, name: str) -> Vertex:
        """Return the vertex called ``name``; raise KeyError if absent."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"no vertex named {name!r}") from None

    def add_vertex(self, content: str, x: int = 0, y: int = 0) -> Vertex:
        """Append a new vertex; raise ValueError if the name is taken."""
        if content is None:
            raise TypeError("vertex content must be a string")
        if content in self._by_name:
            raise ValueError(f"vertex {content!r} already exists")
        vertex = Vertex(index=len(self._vertices), content=content, x=x, y=y)
        self._vertices.append(vertex)
        self._by_name[content] = vertex
        return vertex

    def add_edge(
        self,
        src: str,
        dest: str,
        edge_type: EdgeType = EdgeType.UNIDIRECTIONAL,
        weight: int = 0,
    ) -> None:
        """Connect ``src`` to ``dest``, and back as well when bidirectional.

        Raises KeyError if either vertex does not exist.
        """
        source = self.vertex(src)
        target = self.vertex(dest)
        source.edges.append(Edge(target, weight))
        if EdgeType(edge_type) is EdgeType.BIDIRECTIONAL:
            target.edges.append(Edge(source, weight))

    def format(self) -> str:
        """Render the adjacency list, one line per vertex."""
        lines = [f"Number of vertices: {len(self._vertices)}"]
        for vertex in self._vertices:
            line = f"[{vertex.index}] {vertex.content}"
            if vertex.edges:
                line += " ->" + "->".join(
                    str(edge.dest.index) for edge in vertex.edges
                )
            lines.append(line)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format()