from hypothesis import given
from hypothesis import strategies as st

from algolab.backtracking import n_queens, subset_sums


def test_subset_sums_classic_example():
    assert subset_sums([1, 2, 5, 6, 8], 9) == [[1, 2, 6], [1, 8]]


def test_subset_sums_no_solution():
    assert subset_sums([2, 4, 6], 5) == []
    assert subset_sums([], 3) == []


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


@given(
    st.lists(st.integers(1, 20), max_size=10, unique=True),
    st.integers(1, 60),
)
def test_subset_sums_results_are_valid(values, target):
    results = subset_sums(values, target)
    for subset in results:
        assert sum(subset) == target
        assert _is_subsequence(subset, values)
    assert len({tuple(s) for s in results}) == len(results)


@given(st.lists(st.integers(1, 20), min_size=1, max_size=8, unique=True))
def test_subset_sums_finds_whole_set(values):
    assert sorted(values) in [sorted(s) for s in subset_sums(values, sum(values))]


def test_four_queens():
    assert n_queens(4) == [(2, 4, 1, 3), (3, 1, 4, 2)]


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


def test_small_boards():
    assert n_queens(1) == [(1,)]
    assert n_queens(2) == []
    assert n_queens(3) == []
    assert n_queens(0) == []


def test_queens_solutions_do_not_attack():
    solutions = n_queens(6)
    assert solutions == sorted(solutions)
    for sol in solutions:
        assert sorted(sol) == list(range(1, 7))
        for r1, c1 in enumerate(sol):
            for r2, c2 in enumerate(sol[r1 + 1 :], start=r1 + 1):
                assert abs(c1 - c2) != r2 - r1