"""Backtracking searches: subset sums and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _subsets(
    values: Sequence[int], target: int, start: int, total: int, chosen: list[int]
) -> Iterator[list[int]]:
    if start == len(values):
        return
    value = values[start]
    if total + value == target:
        yield [*chosen, value]
    elif total + value < target:
        yield from _subsets(values, target, start + 1, total + value, [*chosen, value])
    yield from _subsets(values, target, start + 1, total, chosen)


def subset_sums(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every subset of ``values`` that adds up to ``target``.

    Subsets keep the order of ``values`` and are listed with earlier elements
    included before they are left out. An empty result means no solution.
    """
    return list(_subsets(values, target, 0, 0, []))


def _safe(columns: list[int], column: int) -> bool:
    row = len(columns)
    return all(
        placed != column and abs(placed - column) != row - earlier
        for earlier, placed in enumerate(columns)
    )


def _queens(n: int, columns: list[int]) -> Iterator[tuple[int, ...]]:
    if len(columns) == n:
        yield tuple(columns)
        return
    for column in range(1, n + 1):
        if _safe(columns, column):
            columns.append(column)
            yield from _queens(n, columns)
            columns.pop()


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Each solution gives, row by row, the 1-based column of that row's queen.
    Solutions come in lexicographic order; ``n`` below 1 has none.
    """
    if n < 1:
        return []
    return list(_queens(n, []))