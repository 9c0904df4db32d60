"""Shortest paths and topological ordering on small graphs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

__all__ = ["INF", "floyd_warshall", "format_distances", "dijkstra", "Graph"]

INF = math.inf
"""Distance used for a pair of vertices with no connecting path."""


def _square(matrix: Iterable[Iterable[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def floyd_warshall(matrix: Iterable[Iterable[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances for a weighted adjacency matrix.

    ``INF`` marks a missing edge. Raises ValueError for a non-square matrix.
    """
    dist = _square(matrix)
    for k in range(len(dist)):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == INF:
                continue
            for j, (current, onward) in enumerate(zip(row, via)):
                if onward != INF and current > through + onward:
                    row[j] = through + onward
    return dist


def format_distances(matrix: Iterable[Iterable[float]]) -> str:
    """Render a distance matrix as tab-separated rows, writing ``INF`` for no path."""
    return "".join(
        "".join(("INF" if value == INF else str(value)) + "\t " for value in row) + "\n"
        for row in matrix
    )


def dijkstra(matrix: Iterable[Iterable[float]]) -> list[float]:
    """Return shortest distances from vertex 0 over an adjacency matrix.

    A zero weight means no edge; unreachable vertices get ``INF``.
    Raises ValueError for a non-square matrix.
    """
    graph = _square(matrix)
    size = len(graph)
    if size == 0:
        return []
    cost: list[float] = [INF] * size
    cost[0] = 0
    visited = [False] * size
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not visited[v] and cost[v] < INF]
        if not candidates:
            break
        nearest = min(candidates, key=cost.__getitem__)
        visited[nearest] = True
        for target, weight in enumerate(graph[nearest]):
            if not visited[target] and weight and cost[target] > weight + cost[nearest]:
                cost[target] = weight + cost[nearest]
    return cost


class Graph:
    """Directed graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is outside the graph")

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def topological_sort(self) -> list[int]:
        """Return vertices in reverse depth-first finishing order."""
        visited = [False] * len(self._adjacency)
        finished: list[int] = []
        for start in range(len(self._adjacency)):
            if visited[start]:
                continue
            visited[start] = True
            stack: list[tuple[int, Iterator[int]]] = [(start, iter(self._adjacency[start]))]
            while stack:
                node, neighbours = stack[-1]
                for neighbour in neighbours:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(self._adjacency[neighbour])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]