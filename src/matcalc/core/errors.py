"""Exceptions raised by the matrix core.

Every error derives from :class:`MatrixError` as well as the closest builtin
exception, so callers may catch either ``MatrixError`` or e.g. ``ValueError``.
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for precondition violations in :mod:`matcalc.core`."""


class InvalidDimensionError(MatrixError, ValueError):
    """Requested matrix size is non-positive."""


class InconsistentRowLengthError(MatrixError, ValueError):
    """Supplied row data does not match the declared column count."""


class IndexOutOfBoundsError(MatrixError, IndexError):
    """A row or column index falls outside the matrix."""


class DimensionMismatchError(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class NotSquareError(MatrixError, ValueError):
    """An operation that needs a square matrix received a rectangular one."""


__all__ = [
    "MatrixError",
    "InvalidDimensionError",
    "InconsistentRowLengthError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "NotSquareError",
]
