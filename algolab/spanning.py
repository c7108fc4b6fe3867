"""Minimum spanning trees over cost matrices: Kruskal's and Prim's algorithms.

Nodes are numbered from 1. A missing edge is marked by ``INFINITY`` (999) or more.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from algolab.shortest_paths import INFINITY

Matrix = Sequence[Sequence[float]]


class NoSpanningTreeError(ValueError):
    """Raised when the graph is not connected, so no spanning tree exists."""


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a minimum spanning tree and their total cost."""

    edges: tuple[tuple[int, int], ...]
    cost: float


def _order(matrix: Matrix) -> int:
    n = len(matrix)
    if n == 0:
        raise ValueError("cost matrix is empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix must be square")
    return n


def kruskal(cost: Matrix) -> SpanningTree:
    """Build a minimum spanning tree with Kruskal's algorithm.

    Only the upper triangle of the matrix is read; edges are reported as (u, v)
    with u < v, in the order they join the tree.
    """
    n = _order(cost)
    candidates = sorted(
        (
            (cost[i][j], i + 1, j + 1)
            for i in range(n)
            for j in range(i + 1, n)
            if cost[i][j] < INFINITY
        ),
        key=lambda edge: edge[0],
    )
    parent = list(range(n + 1))

    def find(node: int) -> int:
        while node != parent[node]:
            node = parent[node]
        return node

    edges: list[tuple[int, int]] = []
    total: float = 0
    for weight, u, v in candidates:
        if len(edges) == n - 1:
            break
        root_u, root_v = find(u), find(v)
        if root_u == root_v:
            continue
        edges.append((u, v))
        total += weight
        if root_u < root_v:
            parent[root_v] = root_u
        else:
            parent[root_u] = root_v
    if len(edges) != n - 1:
        raise NoSpanningTreeError("graph is not connected; no spanning tree exists")
    return SpanningTree(tuple(edges), total)


def prim(cost: Matrix, source: int) -> SpanningTree:
    """Build a minimum spanning tree with Prim's algorithm, growing from ``source``.

    Each edge is reported as (node, parent), in the order the node joins the tree.
    """
    n = _order(cost)
    if not 1 <= source <= n:
        raise ValueError(f"source {source} is not a node of a {n}-node graph")
    source_row = cost[source - 1]
    nearest = {v: source_row[v - 1] for v in range(1, n + 1)}
    parent = dict.fromkeys(range(1, n + 1), source)
    in_tree = {source}
    edges: list[tuple[int, int]] = []
    total: float = 0
    for _ in range(n - 1):
        chosen = None
        best = INFINITY
        for node, distance in nearest.items():
            if node not in in_tree and distance <= best:
                best = distance
                chosen = node
        if chosen is None:
            break
        edges.append((chosen, parent[chosen]))
        total += cost[chosen - 1][parent[chosen] - 1]
        in_tree.add(chosen)
        row = cost[chosen - 1]
        for v in range(1, n + 1):
            if v not in in_tree and row[v - 1] < nearest[v]:
                nearest[v] = row[v - 1]
                parent[v] = chosen
    if len(edges) != n - 1 or total >= INFINITY:
        raise NoSpanningTreeError("graph is not connected; no spanning tree exists")
    return SpanningTree(tuple(edges), total)