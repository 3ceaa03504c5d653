"""Numeric core: the dense matrix type and the operations built on it."""

from .errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InconsistentRowLengthError,
    InvalidDimensionError,
    MatrixError,
    NotSquareError,
)
from .formatting import format_matrix, format_value
from .matrix import Matrix
from .operations import (
    add,
    find_inverse,
    identity,
    is_addition_allowed,
    is_multiplication_allowed,
    multiply,
    scale,
)
from .transpose import TransposeStrategy, transpose

__all__ = [
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "InconsistentRowLengthError",
    "InvalidDimensionError",
    "Matrix",
    "MatrixError",
    "NotSquareError",
    "TransposeStrategy",
    "add",
    "find_inverse",
    "format_matrix",
    "format_value",
    "identity",
    "is_addition_allowed",
    "is_multiplication_allowed",
    "multiply",
    "scale",
    "transpose",
]
