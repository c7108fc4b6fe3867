# algolab

A small collection of classic algorithms, each written as a plain Python function
that takes ordinary lists and returns its result rather than printing it. There
are no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Names |
| --- | --- |
| `algolab.sorting` | `quicksort`, `bubble_sort`, `merge_sort`, `selection_sort`, `sort_word` |
| `algolab.searching` | `binary_search`, `maximum`, `min_max`, `all_unique`, `primes_below` |
| `algolab.matrix` | `multiply` |
| `algolab.backtracking` | `subset_sums`, `n_queens` |
| `algolab.traversal` | `bfs_tree`, `dfs_tree`, `topological_sort`, `transitive_closure`, `TraversalResult` |
| `algolab.shortest_paths` | `dijkstra`, `shortest_path`, `floyd`, `ShortestPaths`, `NoPathError`, `INFINITY` |
| `algolab.spanning` | `kruskal`, `prim`, `SpanningTree`, `NoSpanningTreeError` |

The sorting functions take any iterable and return a new ascending list; the
input is left untouched.

Graphs are given as square adjacency or cost matrices (lists of lists). Nodes
are numbered from 1, so `matrix[u - 1][v - 1]` describes the edge from `u` to
`v`. In adjacency matrices a `1` marks an edge; in cost matrices a cost of
`INFINITY` (999) or more marks a missing edge.

## Examples

```python
from algolab.sorting import quicksort, sort_word
from algolab.searching import binary_search, min_max, primes_below
from algolab.matrix import multiply
from algolab.backtracking import subset_sums, n_queens

quicksort([5, 3, 8, 1])            # [1, 3, 5, 8]
sort_word("python")                # "hnopty"
binary_search([1, 3, 5, 7], 5)     # 3  (1-based position)
min_max([4, 9, 2, 7])              # (2, 9)  i.e. (smallest, largest)
primes_below(20)                   # [2, 3, 5, 7, 11, 13, 17, 19]
multiply([[1, 2], [3, 4]], [[5], [6]])   # [[17], [39]]

subset_sums([1, 2, 5, 6, 8], 9)    # [[1, 2, 6], [1, 8]]
n_queens(4)                        # [(2, 4, 1, 3), (3, 1, 4, 2)]
```

`n_queens` gives each solution as the 1-based column of the queen in each row.

```python
from algolab.traversal import bfs_tree, dfs_tree, topological_sort, transitive_closure

adjacency = [
    [0, 1, 1, 0],
    [0, 0, 0, 1],
    [0, 0, 0, 1],
    [0, 0, 0, 0],
]

result = bfs_tree(adjacency, 1)
result.visited      # (1, 2, 3, 4)
result.edges        # ((1, 2), (1, 3), (2, 4))
result.spans        # True
result.unreachable  # []

topological_sort(adjacency)   # [1, 3, 2, 4]
transitive_closure(adjacency)
```

`dfs_tree` returns the same kind of `TraversalResult`, built depth first.

```python
from algolab.shortest_paths import dijkstra, shortest_path, floyd
from algolab.spanning import kruskal, prim

cost = [
    [0, 3, 999, 7],
    [3, 0, 4, 2],
    [999, 4, 0, 5],
    [7, 2, 5, 0],
]

paths = dijkstra(cost, 1)
paths.distance_to(3)          # 7
paths.path_to(3)              # [1, 2, 3]
shortest_path(cost, 1, 4)     # ([1, 2, 4], 5)

floyd(cost)
# [[0, 3, 7, 5], [3, 0, 4, 2], [7, 4, 0, 5], [5, 2, 5, 0]]

kruskal(cost)     # SpanningTree(edges=((2, 4), (1, 2), (2, 3)), cost=9)
prim(cost, 1)     # SpanningTree(edges=((2, 1), (4, 2), (3, 2)), cost=9)
```

When `dijkstra` is given a destination it stops as soon as that node would be
settled, so only that node's entry is then guaranteed final.

## Errors

Functions that cannot produce a result raise an exception:

- `binary_search` raises `ValueError` when the key is absent.
- `maximum` and `min_max` raise `ValueError` on an empty sequence.
- `multiply` raises `ValueError` for ragged matrices or mismatched dimensions.
- `topological_sort` raises `ValueError` when the graph has a cycle.
- `ShortestPaths.distance_to`, `ShortestPaths.path_to` and `shortest_path` raise
  `NoPathError` (a `LookupError`) when the destination is unreachable.
- `kruskal` and `prim` raise `NoSpanningTreeError` (a `ValueError`) when the
  graph is not connected.
- Graph functions raise `ValueError` for a non-square matrix or a node number
  outside the graph.

## What it does not do

algolab is a library only. It has no command-line program: nothing prompts for
input or prints results, and there is no random-data generator for the sorts.
Call the functions from your own code.