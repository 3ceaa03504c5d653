"""In-place transpose variants selected by menu code."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from .errors import NotSquareError
from .matrix import Matrix


def _square_size(matrix: Matrix) -> int:
    n, m = matrix.dimensions()
    if n != m:
        raise NotSquareError(f"Transpose requires a square matrix, got {n}x{m}")
    return n


def _main_diagonal(matrix: Matrix) -> None:
    n = _square_size(matrix)
    for row in range(1, n):
        for col in range(row):
            matrix.swap(row, col, col, row)


def _side_diagonal(matrix: Matrix) -> None:
    n = _square_size(matrix)
    for row in range(n):
        for col in range(n - row - 1):
            matrix.swap(row, col, n - 1 - col, n - 1 - row)


def _vertical(matrix: Matrix) -> None:
    n = _square_size(matrix)
    for row in range(n):
        for col in range(n // 2):
            matrix.swap(row, col, row, n - 1 - col)


def _horizontal(matrix: Matrix) -> None:
    n = _square_size(matrix)
    for row in range(n // 2):
        for col in range(n):
            matrix.swap(row, col, n - 1 - row, col)


def _identity(matrix: Matrix) -> None:
    return None


class TransposeStrategy(Enum):
    """Transpose variants keyed by their menu code.

    Every variant except :attr:`IDENTITY` only accepts square matrices, even
    where the reflection would be defined for rectangular ones.
    """

    IDENTITY = 0
    MAIN_DIAGONAL = 1
    SIDE_DIAGONAL = 2
    VERTICAL = 3
    HORIZONTAL = 4

    @classmethod
    def by_number(cls, number: int) -> "TransposeStrategy":
        """Return the variant for ``number``; unknown codes map to ``IDENTITY``."""

        try:
            return cls(number)
        except ValueError:
            return cls.IDENTITY

    def transpose(self, matrix: Matrix) -> None:
        _TRANSPOSERS[self](matrix)


_TRANSPOSERS: Dict[TransposeStrategy, Callable[[Matrix], None]] = {
    TransposeStrategy.IDENTITY: _identity,
    TransposeStrategy.MAIN_DIAGONAL: _main_diagonal,
    TransposeStrategy.SIDE_DIAGONAL: _side_diagonal,
    TransposeStrategy.VERTICAL: _vertical,
    TransposeStrategy.HORIZONTAL: _horizontal,
}


def transpose(matrix: Matrix, code: int) -> Matrix:
    """Apply the variant selected by ``code`` to ``matrix`` and return it."""

    TransposeStrategy.by_number(code).transpose(matrix)
    return matrix


__all__ = ["TransposeStrategy", "transpose"]
