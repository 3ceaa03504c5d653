"""Tests for matrix arithmetic and inversion."""

import numpy as np
import pytest

from matcalc.core import (
    DimensionMismatchError,
    Matrix,
    NotSquareError,
    add,
    find_inverse,
    identity,
    is_addition_allowed,
    is_multiplication_allowed,
    multiply,
    scale,
)


def test_add_elementwise():
    a = Matrix([[1, 2.5], [3, 4]])
    b = Matrix([[0.5, 1], [-3, 10]])
    result = add(a, b)
    for i in range(2):
        for j in range(2):
            assert result[i, j] == a[i, j] + b[i, j]


def test_add_does_not_mutate_inputs():
    a = Matrix([[1, 2]])
    b = Matrix([[3, 4]])
    add(a, b)
    assert a.to_rows() == [[1, 2]] and b.to_rows() == [[3, 4]]


def test_add_rejects_mismatched_shapes():
    a, b = Matrix.empty(2, 3), Matrix.empty(3, 2)
    assert not is_addition_allowed(a, b)
    with pytest.raises(DimensionMismatchError):
        add(a, b)


def test_scale():
    assert scale(Matrix([[1, 2], [3, 4]]), 2.0).to_rows() == [[2, 4], [6, 8]]


def test_multiply():
    result = multiply(Matrix([[1, 2], [3, 4]]), Matrix([[5, 6], [7, 8]]))
    assert result.to_rows() == [[19, 22], [43, 50]]


def test_multiply_rectangular_shapes():
    a = Matrix([[1, 2, 3]])
    b = Matrix([[4], [5], [6]])
    assert is_multiplication_allowed(a, b)
    assert multiply(a, b).to_rows() == [[32]]
    assert multiply(b, a).dimensions() == (3, 3)


def test_multiply_rejects_incompatible_shapes():
    a, b = Matrix.empty(2, 3), Matrix.empty(2, 3)
    assert not is_multiplication_allowed(a, b)
    with pytest.raises(DimensionMismatchError):
        multiply(a, b)


def test_identity_is_neutral_for_multiply():
    a = Matrix([[1.5, -2, 3], [4, 0.25, 6]])
    assert multiply(identity(2), a) == a
    assert multiply(a, identity(3)) == a


def test_multiply_is_associative():
    a = Matrix([[1, 2], [3, 4], [5, 6]])
    b = Matrix([[0.5, -1, 2], [3, 0, 1]])
    c = Matrix([[2], [1], [-1]])
    left = multiply(multiply(a, b), c).to_rows()
    right = multiply(a, multiply(b, c)).to_rows()
    assert np.allclose(left, right)


def test_multiply_matches_numpy():
    rng = np.random.default_rng(7)
    a = rng.normal(size=(3, 4))
    b = rng.normal(size=(4, 2))
    result = multiply(Matrix(a.tolist()), Matrix(b.tolist()))
    assert np.allclose(result.to_rows(), a @ b)


def test_inverse_of_2x2():
    inverse = find_inverse(Matrix([[4, 7], [2, 6]]))
    assert np.allclose(inverse.to_rows(), [[0.6, -0.7], [-0.2, 0.4]])


@pytest.mark.parametrize(
    "rows",
    [
        [[2.0]],
        [[1, 2], [3, 4]],
        [[2, -1, 0], [1, 2, 1], [1, 1, 1]],
        [[1, 2, 3, 4], [0, 1, 0, 2], [3, 0, 1, 1], [2, 2, 0, 1]],
    ],
)
def test_inverse_times_matrix_is_identity(rows):
    a = Matrix(rows)
    product = multiply(a, find_inverse(a))
    assert np.allclose(product.to_rows(), np.eye(len(rows)))


def test_inverse_of_singular_matrix_is_none():
    assert find_inverse(Matrix([[1, 2], [2, 4]])) is None
    assert find_inverse(Matrix([[0.0]])) is None


def test_inverse_requires_square():
    with pytest.raises(NotSquareError):
        find_inverse(Matrix.empty(2, 3))
