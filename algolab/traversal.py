"""Graph traversals over adjacency matrices: BFS, DFS, topological order and closure.

Nodes are numbered from 1; ``adjacency[u - 1][v - 1] == 1`` marks an edge u -> v.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[int]]


def _order(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_node(node: int, n: int, role: str) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"{role} {node} is not a node of a {n}-node graph")


@dataclass(frozen=True)
class TraversalResult:
    """Nodes reached from a source, in visiting order, and the tree edges used."""

    node_count: int
    visited: tuple[int, ...]
    edges: tuple[tuple[int, int], ...]

    @property
    def unreachable(self) -> list[int]:
        """Nodes that the traversal never reached, in ascending order."""
        seen = set(self.visited)
        return [node for node in range(1, self.node_count + 1) if node not in seen]

    @property
    def spans(self) -> bool:
        """True if every node was reached, so the edges form a spanning tree."""
        return len(self.visited) == self.node_count


def bfs_tree(adjacency: Matrix, source: int) -> TraversalResult:
    """Breadth-first search from ``source``, recording the tree edges it follows."""
    n = _order(adjacency)
    _check_node(source, n, "source")
    seen = {source}
    visited = [source]
    edges: list[tuple[int, int]] = []
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, linked in enumerate(adjacency[u - 1], start=1):
            if linked == 1 and v not in seen:
                seen.add(v)
                visited.append(v)
                queue.append(v)
                edges.append((u, v))
    return TraversalResult(n, tuple(visited), tuple(edges))


def dfs_tree(adjacency: Matrix, source: int) -> TraversalResult:
    """Depth-first search from ``source``, recording the tree edges it follows."""
    n = _order(adjacency)
    _check_node(source, n, "source")
    seen = {source}
    visited = [source]
    edges: list[tuple[int, int]] = []
    stack: list[tuple[int, Iterator[tuple[int, int]]]] = [
        (source, enumerate(adjacency[source - 1], start=1))
    ]
    while stack:
        u, neighbours = stack[-1]
        for v, linked in neighbours:
            if linked == 1 and v not in seen:
                seen.add(v)
                visited.append(v)
                edges.append((u, v))
                stack.append((v, enumerate(adjacency[v - 1], start=1)))
                break
        else:
            stack.pop()
    return TraversalResult(n, tuple(visited), tuple(edges))


def topological_sort(adjacency: Matrix) -> list[int]:
    """Return the nodes in topological order, removing sources with a stack.

    Raises ValueError if the graph has a cycle.
    """
    n = _order(adjacency)
    indegree = [0] + [sum(row[j] for row in adjacency) for j in range(n)]
    stack = [node for node in range(1, n + 1) if indegree[node] == 0]
    order: list[int] = []
    while stack:
        u = stack.pop()
        order.append(u)
        for v, linked in enumerate(adjacency[u - 1], start=1):
            if linked == 1:
                indegree[v] -= 1
                if indegree[v] == 0:
                    stack.append(v)
    if len(order) != n:
        raise ValueError("graph has a cycle; no topological order exists")
    return order


def transitive_closure(adjacency: Matrix) -> list[list[int]]:
    """Return the reachability matrix of the graph, computed by Warshall's algorithm."""
    _order(adjacency)
    closure = [list(row) for row in adjacency]
    for k, via in enumerate(closure):
        for row in closure:
            if row[k] != 1:
                continue
            for j, onward in enumerate(via):
                if row[j] == 0 and onward == 1:
                    row[j] = 1
    return closure