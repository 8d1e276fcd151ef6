"""Random graph generation, depth-first and breadth-first traversals, demos."""

from __future__ import annotations

import argparse
import random
from collections import deque
from typing import Any, Iterator, Optional, Sequence

from netlogkit.graph import Graph
from netlogkit.hashmaps import ChainedHashMap, LinearProbingHashMap

_MULTILIST_SPREAD = 10
_EXTRA_EDGES = ((7, 0, 16), (7, 5, 17), (0, 8, 18))


def random_matrix(
    vertices: int, edges: int, rng: Optional[random.Random] = None
) -> list[list[int]]:
    """Build an adjacency matrix with at most `edges` ones, column 0 left empty."""
    rng = rng or random.Random()
    matrix = [[0] * vertices for _ in range(vertices)]
    placed = 0
    for row in matrix:
        for column in range(1, vertices):
            bit = rng.randrange(2)
            if placed < edges and bit == 1:
                row[column] = 1
                placed += 1
    return matrix


def random_multilist(
    vertices: int, edges: int, rng: Optional[random.Random] = None
) -> Graph:
    """Build a graph with `edges` random edges among the first ten vertices,
    plus three fixed edges 7->0, 7->5 and 0->8."""
    if vertices < _MULTILIST_SPREAD:
        raise ValueError(f"at least {_MULTILIST_SPREAD} vertices are required")
    rng = rng or random.Random()
    graph = Graph()
    for value in range(vertices):
        graph.add_vertex(value)
    for label in range(edges):
        source = graph.vertex(rng.randrange(_MULTILIST_SPREAD))
        target = graph.vertex(rng.randrange(_MULTILIST_SPREAD))
        graph.add_edge(source, target, label)
    for source, target, label in _EXTRA_EDGES:
        graph.add_edge(graph.vertex(source), graph.vertex(target), label)
    return graph


def render_matrix(matrix: Sequence[Sequence[int]], labels: Sequence[Any]) -> str:
    """Render a matrix as a tab-separated table headed by the labels."""
    lines = ["\t" + "".join(f"{label}\t" for label in labels), ""]
    for label, row in zip(labels, matrix):
        lines.append(f"{label}\t" + "".join(f"{value}\t" for value in row))
    lines.append("")
    return "\n".join(lines) + "\n"


def dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order of the vertices reachable from start, start included."""

    def neighbours(node: int) -> Iterator[int]:
        return iter([i for i, bit in enumerate(matrix[node]) if bit == 1])

    visited = [start]
    seen = {start}
    stack = [neighbours(start)]
    while stack:
        for candidate in stack[-1]:
            if candidate not in seen:
                seen.add(candidate)
                visited.append(candidate)
                stack.append(neighbours(candidate))
                break
        else:
            stack.pop()
    return visited


def bfs(graph: Graph, start: int) -> list[Any]:
    """Breadth-first order of vertex values reachable from the vertex at start."""
    first = graph.vertex(start)
    order: list[Any] = []
    seen = [first.info]
    queue = deque([first])
    while queue:
        vertex = queue.popleft()
        order.append(vertex.info)
        for edge in vertex.edges:
            value = edge.target.info
            if value not in seen:
                seen.append(value)
                queue.append(edge.target)
    return order


def hashmap_demo() -> str:
    """Run the linear-probing and chaining demonstration and return its text."""
    lines = ["--1. Hash Map con desbordamiento Lineal--"]
    linear = LinearProbingHashMap(5)
    for key in (1, 5, 11, 15, 2, 8):
        linear.put(key, key)
    lines.append("Impresion de Resultados:")
    for key in (5, 15, 8):
        try:
            lines.append(str(linear.get(key)))
        except KeyError:
            lines.append("-1")

    lines.append("--2. Hash Map con desbordamiento en Cadena--")
    chained = ChainedHashMap(5)
    for key in (1, 5, 11, 15, 2, 12):
        chained.put(key, key)
    lines.append("Impresion de Resultados:")
    for key in (5, 15, 2, 12):
        try:
            bucket, place = chained.position(key)
        except KeyError:
            lines.append("-1")
            continue
        lines.extend(
            [
                "Posicion en el Hash Map",
                f"{bucket} --> {place}",
                "Valor",
                str(chained.get(key)),
            ]
        )
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a DFS over a random matrix and a BFS over a random multilist."""
    parser = argparse.ArgumentParser(description="Graph traversal demonstration.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--vertices", type=int, default=10)
    parser.add_argument("--edges", type=int, default=15)
    parser.add_argument(
        "--hashmaps", action="store_true", help="run the hash map demonstration"
    )
    args = parser.parse_args(argv)

    if args.hashmaps:
        print(hashmap_demo(), end="")
        return 0

    rng = random.Random(args.seed)
    matrix = random_matrix(args.vertices, args.edges, rng)
    print("------ Matriz de adyacencia con DFS ------")
    for node in dfs(matrix, 0):
        print(node)

    try:
        graph = random_multilist(args.vertices, args.edges, rng)
    except ValueError as error:
        parser.error(str(error))
    print("------ Multilista con BFS ------")
    for value in bfs(graph, 0):
        print(value)
    return 0