import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.shortest_paths import (
    INFINITY,
    NoPathError,
    ShortestPaths,
    dijkstra,
    floyd,
    shortest_path,
)


@st.composite
def _costs(draw):
    n = draw(st.integers(1, 6))
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i != j:
                matrix[i][j] = draw(st.one_of(st.integers(1, 20), st.just(INFINITY)))
    return matrix


LINE = [
    [0, 4, 20],
    [4, 0, 5],
    [20, 5, 0],
]


def test_shortest_path_prefers_cheaper_detour():
    path, distance = shortest_path(LINE, 1, 3)
    assert path == [1, 2, 3]
    assert distance == 9


def test_unreachable_destination_raises():
    cost = [
        [0, 3, INFINITY],
        [3, 0, INFINITY],
        [INFINITY, INFINITY, 0],
    ]
    result = dijkstra(cost, 1)
    with pytest.raises(NoPathError) as info:
        result.path_to(3)
    assert info.value.source == 1
    assert info.value.destination == 3
    with pytest.raises(NoPathError):
        shortest_path(cost, 1, 3)


def test_path_to_source_is_source_alone():
    result = dijkstra(LINE, 2)
    assert result.path_to(2) == [2]
    assert result.distance_to(2) == 0


def test_unknown_node_rejected():
    result = ShortestPaths(1, {1: 0, 2: 3}, {1: 1, 2: 1})
    with pytest.raises(ValueError):
        result.distance_to(7)
    with pytest.raises(ValueError):
        dijkstra(LINE, 4)
    with pytest.raises(ValueError):
        dijkstra(LINE, 1, 0)
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 1)


@given(_costs(), st.data())
def test_dijkstra_agrees_with_floyd(cost, data):
    n = len(cost)
    source = data.draw(st.integers(1, n))
    result = dijkstra(cost, source)
    table = floyd(cost)
    for dest in range(1, n + 1):
        expected = table[source - 1][dest - 1]
        if expected >= INFINITY:
            with pytest.raises(NoPathError):
                result.distance_to(dest)
        else:
            assert result.distance_to(dest) == expected


@given(_costs(), st.data())
def test_paths_add_up_to_distances(cost, data):
    n = len(cost)
    source = data.draw(st.integers(1, n))
    result = dijkstra(cost, source)
    for dest in range(1, n + 1):
        try:
            path = result.path_to(dest)
        except NoPathError:
            continue
        assert path[0] == source and path[-1] == dest
        assert len(set(path)) == len(path)
        total = sum(cost[u - 1][v - 1] for u, v in zip(path, path[1:]))
        if dest == source:
            total = cost[source - 1][source - 1]
        assert total == result.distance_to(dest)


@given(_costs(), st.data())
def test_early_stop_gives_same_distance(cost, data):
    n = len(cost)
    source = data.draw(st.integers(1, n))
    dest = data.draw(st.integers(1, n))
    full = dijkstra(cost, source)
    try:
        expected = full.distance_to(dest)
    except NoPathError:
        with pytest.raises(NoPathError):
            shortest_path(cost, source, dest)
        return
    path, distance = shortest_path(cost, source, dest)
    assert distance == expected
    assert path[0] == source and path[-1] == dest


@given(_costs())
def test_floyd_invariants(cost):
    original = [list(row) for row in cost]
    table = floyd(cost)
    n = len(cost)
    assert cost == original
    assert floyd(table) == table
    for i in range(n):
        assert table[i][i] == 0
        for j in range(n):
            assert table[i][j] <= cost[i][j]
            for k in range(n):
                if table[i][k] < INFINITY and table[k][j] < INFINITY:
                    assert table[i][j] <= table[i][k] + table[k][j]


def test_floyd_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        floyd([[0, 1], [1, 0, 2]])