"""Shortest paths over cost matrices: Dijkstra from one source and Floyd for all pairs.

Nodes are numbered from 1. A missing edge is marked by ``INFINITY`` (999) or any
larger value; a distance of ``INFINITY`` or more means the node is unreachable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

INFINITY = 999

Matrix = Sequence[Sequence[float]]


class NoPathError(LookupError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source: int, destination: int) -> None:
        super().__init__(f"no path exists from {source} to {destination}")
        self.source = source
        self.destination = destination


def _order(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix must be square")
    return n


def _check_node(node: int, n: int, role: str) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"{role} {node} is not a node of a {n}-node graph")


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors found by a Dijkstra search from ``source``."""

    source: int
    distances: Mapping[int, float]
    predecessors: Mapping[int, int]

    def distance_to(self, destination: int) -> float:
        """Return the length of the shortest path to ``destination``."""
        if destination not in self.distances:
            raise ValueError(f"{destination} is not a node of this graph")
        distance = self.distances[destination]
        if distance >= INFINITY:
            raise NoPathError(self.source, destination)
        return distance

    def path_to(self, destination: int) -> list[int]:
        """Return the nodes of the shortest path from the source to ``destination``."""
        self.distance_to(destination)
        path = [destination]
        node = destination
        while node != self.source:
            node = self.predecessors[node]
            path.append(node)
        path.reverse()
        return path


def dijkstra(cost: Matrix, source: int, destination: Optional[int] = None) -> ShortestPaths:
    """Run Dijkstra's algorithm from ``source`` over the cost matrix.

    When ``destination`` is given the search stops as soon as that node would be
    settled; only its entry is then guaranteed final.
    """
    n = _order(cost)
    _check_node(source, n, "source")
    if destination is not None:
        _check_node(destination, n, "destination")
    source_row = cost[source - 1]
    distances = {v: source_row[v - 1] for v in range(1, n + 1)}
    predecessors = dict.fromkeys(range(1, n + 1), source)
    settled = {source}
    for _ in range(n - 1):
        nearest = None
        best = INFINITY
        for node, distance in distances.items():
            if node not in settled and distance <= best:
                best = distance
                nearest = node
        if nearest is None or nearest == destination:
            break
        settled.add(nearest)
        row = cost[nearest - 1]
        for v in range(1, n + 1):
            if v in settled:
                continue
            candidate = distances[nearest] + row[v - 1]
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = nearest
    return ShortestPaths(source, distances, predecessors)


def shortest_path(cost: Matrix, source: int, destination: int) -> tuple[list[int], float]:
    """Return ``(path, distance)`` for the shortest route from source to destination.

    Raises NoPathError if the destination is unreachable.
    """
    result = dijkstra(cost, source, destination)
    return result.path_to(destination), result.distance_to(destination)


def floyd(cost: Matrix) -> list[list[float]]:
    """Return the all-pairs shortest distance matrix computed by Floyd's algorithm."""
    _order(cost)
    distances = [list(row) for row in cost]
    for k, via in enumerate(distances):
        for row in distances:
            to_k = row[k]
            for j, onward in enumerate(via):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return distances