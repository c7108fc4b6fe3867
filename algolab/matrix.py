"""Dense matrix multiplication over lists of rows."""

from __future__ import annotations

from collections.abc import Sequence


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the product ``a @ b`` of two matrices given as sequences of rows.

    Raises ValueError if a matrix is ragged or the inner dimensions differ.
    """
    inner = len(a[0]) if a else len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("rows of the first matrix differ in length")
    if len(b) != inner:
        raise ValueError(
            f"cannot multiply: first matrix has {inner} columns, second has {len(b)} rows"
        )
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*b)) if b else []
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]