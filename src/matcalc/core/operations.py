"""Arithmetic over :class:`~matcalc.core.matrix.Matrix` values.

None of these functions mutate their arguments; each returns a new matrix.
"""

from __future__ import annotations

from typing import Optional

from matcalc.logging import get_logger

from .errors import DimensionMismatchError, NotSquareError
from .matrix import Matrix
from .transpose import TransposeStrategy

logger = get_logger(__name__, console=False)


def is_addition_allowed(a: Matrix, b: Matrix) -> bool:
    return a.dimensions() == b.dimensions()


def is_multiplication_allowed(a: Matrix, b: Matrix) -> bool:
    return a.columns == b.rows


def add(a: Matrix, b: Matrix) -> Matrix:
    if not is_addition_allowed(a, b):
        raise DimensionMismatchError(
            "Cannot add {}x{} and {}x{} matrices".format(*a.dimensions(), *b.dimensions())
        )
    n, m = a.dimensions()
    logger.debug("add %sx%s", n, m)
    return Matrix([[a[x, y] + b[x, y] for y in range(m)] for x in range(n)])


def scale(matrix: Matrix, c: float) -> Matrix:
    n, m = matrix.dimensions()
    logger.debug("scale %sx%s by %s", n, m, c)
    return Matrix([[matrix[x, y] * c for y in range(m)] for x in range(n)])


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a @ b``.

    Each entry is accumulated from ``0.0`` with the inner index ascending, so
    results are reproducible to the last bit.
    """

    if not is_multiplication_allowed(a, b):
        raise DimensionMismatchError(
            "Cannot multiply {}x{} by {}x{} matrix".format(*a.dimensions(), *b.dimensions())
        )
    n, m = a.dimensions()
    k = b.columns
    logger.debug("multiply %sx%s by %sx%s", n, m, m, k)
    result = Matrix.empty(n, k)
    for x in range(n):
        for y in range(k):
            total = 0.0
            for idx in range(m):
                total += a[x, idx] * b[idx, y]
            result[x, y] = total
    return result


def identity(n: int) -> Matrix:
    result = Matrix.empty(n)
    for idx in range(n):
        result[idx, idx] = 1.0
    return result


def find_inverse(matrix: Matrix) -> Optional[Matrix]:
    """Return the inverse of ``matrix`` via its adjugate.

    Returns
    -------
    Matrix or None
        ``None`` when the determinant is exactly zero (the matrix is singular).

    Raises
    ------
    NotSquareError
        If ``matrix`` is not square.
    """

    if not matrix.is_square():
        raise NotSquareError(
            "Inverse requires a square matrix, got {}x{}".format(*matrix.dimensions())
        )
    determinant = matrix.determinant()
    if determinant == 0.0:
        logger.debug("matrix is singular, no inverse")
        return None
    if matrix.rows == 1:
        adjugate = Matrix([[1.0]])
    else:
        adjugate = matrix.to_cofactor_matrix()
        TransposeStrategy.MAIN_DIAGONAL.transpose(adjugate)
    return scale(adjugate, 1.0 / determinant)


__all__ = [
    "add",
    "find_inverse",
    "identity",
    "is_addition_allowed",
    "is_multiplication_allowed",
    "multiply",
    "scale",
]
