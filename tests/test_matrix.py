import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.matrix import multiply


def test_two_by_two_product():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_identity_leaves_matrix_unchanged():
    m = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply(m, identity) == m


def test_result_shape():
    result = multiply([[1, 2, 3]], [[1], [2], [3]])
    assert len(result) == 1
    assert len(result[0]) == 1


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2], [3]], [[1], [2]])
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2], [3]])


def _matrix(rows, cols):
    return st.lists(
        st.lists(st.integers(-9, 9), min_size=cols, max_size=cols),
        min_size=rows,
        max_size=rows,
    )


@given(st.data())
def test_multiplication_is_associative(data):
    p, q, r, s = (data.draw(st.integers(1, 4)) for _ in range(4))
    a = data.draw(_matrix(p, q))
    b = data.draw(_matrix(q, r))
    c = data.draw(_matrix(r, s))
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


@given(st.data())
def test_transpose_of_product(data):
    p, q, r = (data.draw(st.integers(1, 4)) for _ in range(3))
    a = data.draw(_matrix(p, q))
    b = data.draw(_matrix(q, r))

    def transpose(m):
        return [list(col) for col in zip(*m)]

    assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))