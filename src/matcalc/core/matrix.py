"""Dense matrix type with bounds-checked access and cofactor expansion."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .errors import (
    IndexOutOfBoundsError,
    InconsistentRowLengthError,
    InvalidDimensionError,
    NotSquareError,
)


class Matrix:
    """A rectangular grid of floats whose shape is fixed at construction.

    Parameters
    ----------
    rows:
        Row data. Every row must have the same, non-zero length. Values are
        copied and coerced to ``float`` so the matrix never aliases the
        caller's lists.

    Examples
    --------
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.dimensions()
    (2, 2)
    >>> m[1, 0]
    3.0
    >>> m.determinant()
    -2.0
    """

    __slots__ = ("_data", "_n", "_m")

    def __init__(self, rows: Iterable[Iterable[float]]):
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise InvalidDimensionError("Matrix must have at least one row and one column")
        columns = len(data[0])
        for index, row in enumerate(data):
            if len(row) != columns:
                raise InconsistentRowLengthError(
                    f"Row {index} has {len(row)} elements, expected {columns}"
                )
        self._data: List[List[float]] = data
        self._n = len(data)
        self._m = columns

    @classmethod
    def empty(cls, n: int, m: int | None = None) -> "Matrix":
        """Return an ``n x m`` matrix of zeros (square when ``m`` is omitted)."""

        if m is None:
            m = n
        if n <= 0 or m <= 0:
            raise InvalidDimensionError(f"Invalid matrix size: {n}x{m}")
        return cls([[0.0] * m for _ in range(n)])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        return cls(rows)

    # -- shape -------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._n

    @property
    def columns(self) -> int:
        return self._m

    def dimensions(self) -> Tuple[int, int]:
        return self._n, self._m

    def is_square(self) -> bool:
        return self._n == self._m

    # -- element access ----------------------------------------------------

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self._n and 0 <= col < self._m):
            raise IndexOutOfBoundsError(
                f"Index out of range: ({row}, {col}) for {self._n}x{self._m} matrix"
            )

    def get(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self._data[row][col] = float(value)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def swap(self, r1: int, c1: int, r2: int, c2: int) -> None:
        """Exchange the values at ``(r1, c1)`` and ``(r2, c2)`` in place."""

        self._check_index(r1, c1)
        self._check_index(r2, c2)
        data = self._data
        data[r1][c1], data[r2][c2] = data[r2][c2], data[r1][c1]

    def to_rows(self) -> List[List[float]]:
        return [list(row) for row in self._data]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"

    # -- determinant and cofactors -----------------------------------------

    def _require_square(self, operation: str) -> None:
        if not self.is_square():
            raise NotSquareError(
                f"{operation} requires a square matrix, got {self._n}x{self._m}"
            )

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along row 0.

        The expansion is recursive and runs in factorial time; it is meant for
        the small matrices typed into the calculator.
        """

        self._require_square("Determinant")
        n = self._n
        a = self._data
        if n == 1:
            return a[0][0]
        if n == 2:
            return a[0][0] * a[1][1] - a[0][1] * a[1][0]
        result = 0.0
        for col in range(n):
            result += a[0][col] * self.cofactor(0, col)
        return result

    def minor(self, row: int, col: int) -> "Matrix":
        """Return a copy with row ``row`` and column ``col`` removed."""

        if not 0 <= row < self._n:
            raise IndexOutOfBoundsError(f"Index out of range: {row}")
        if not 0 <= col < self._m:
            raise IndexOutOfBoundsError(f"Index out of range: {col}")
        if self._n == 1 or self._m == 1:
            raise InvalidDimensionError(
                f"Cannot take a minor of a {self._n}x{self._m} matrix"
            )
        return Matrix(
            [
                [value for y, value in enumerate(values) if y != col]
                for x, values in enumerate(self._data)
                if x != row
            ]
        )

    def cofactor(self, row: int, col: int) -> float:
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * self.minor(row, col).determinant()

    def to_cofactor_matrix(self) -> "Matrix":
        self._require_square("Cofactor matrix")
        n = self._n
        return Matrix([[self.cofactor(x, y) for y in range(n)] for x in range(n)])


__all__ = ["Matrix"]
