"""Dense-matrix calculator.

The top-level package re-exports the numeric core so callers can write
``from matcalc import Matrix, find_inverse``.
"""

from .core import (
    Matrix,
    MatrixError,
    TransposeStrategy,
    add,
    find_inverse,
    format_matrix,
    format_value,
    identity,
    is_addition_allowed,
    is_multiplication_allowed,
    multiply,
    scale,
    transpose,
)

__version__ = "1.0.0"

__all__ = [
    "Matrix",
    "MatrixError",
    "TransposeStrategy",
    "__version__",
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
