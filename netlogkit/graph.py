"""Directed multigraph stored as adjacency lists of labelled edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class Edge:
    """A labelled edge pointing at a target vertex."""

    info: Any
    target: "Vertex"

    def __str__(self) -> str:
        return f"{self.info} ---> {self.target.info}"


@dataclass(eq=False)
class Vertex:
    """A vertex holding a value and its outgoing edges, in insertion order."""

    info: Any
    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        """Append an outgoing edge."""
        self.edges.append(edge)

    def remove_edge(self, edge: Edge) -> None:
        """Remove the given edge object; raise ValueError if it is not here."""
        for position, candidate in enumerate(self.edges):
            if candidate is edge:
                del self.edges[position]
                return
        raise ValueError("edge does not belong to this vertex")

    def edge(self, index: int) -> Edge:
        """Return the outgoing edge at the given position."""
        return self.edges[index]

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        lines = [f"Vertex: {self.info}\n"]
        lines.extend(f"{edge}\n" for edge in self.edges)
        return "".join(lines)


class Graph:
    """A directed graph whose vertices keep the order they were added in."""

    def __init__(self) -> None:
        self._nodes: list[Vertex] = []

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def add_vertex(self, value: Any) -> Vertex:
        """Add a vertex (or wrap a value in a new vertex) and return it."""
        vertex = value if isinstance(value, Vertex) else Vertex(value)
        self._nodes.append(vertex)
        return vertex

    def _owned(self, vertex: Vertex) -> Vertex:
        if not any(node is vertex for node in self._nodes):
            raise ValueError("source vertex is not part of this graph")
        return vertex

    def _find(self, value: Any) -> Vertex:
        found = None
        for node in self._nodes:
            if node.info == value:
                found = node
        if found is None:
            raise KeyError(value)
        return found

    def add_edge(self, source: Vertex, target: Any, info: Any) -> Edge:
        """Add an edge from source to target.

        The target may be a vertex or a vertex value; a value resolves to the
        last vertex holding it.
        """
        vertex = self._owned(source)
        target_vertex = target if isinstance(target, Vertex) else self._find(target)
        edge = Edge(info, target_vertex)
        vertex.add_edge(edge)
        return edge

    def remove_edge(self, source: Vertex, target: Vertex, info: Any) -> bool:
        """Remove the first edge from source to target with this info."""
        vertex = self._owned(source)
        for edge in vertex.edges:
            if edge.info == info and edge.target is target:
                vertex.remove_edge(edge)
                return True
        return False

    def vertex(self, index: int) -> Vertex:
        """Return the vertex at the given position."""
        return self._nodes[index]

    def edge(self, vertex_index: int, edge_index: int) -> Edge:
        """Return an outgoing edge of the vertex at vertex_index."""
        return self._nodes[vertex_index].edge(edge_index)

    def edge_count(self, index: int) -> int:
        """Number of outgoing edges of the vertex at the given position."""
        return len(self._nodes[index])

    def __str__(self) -> str:
        return "--- Graph ---\n" + "".join(str(node) for node in self._nodes)