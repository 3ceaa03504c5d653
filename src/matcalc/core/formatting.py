"""Text rendering of values and matrices for display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from .matrix import Matrix

DEFAULT_PRECISION = 2


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render ``value`` with at most ``precision`` fraction digits.

    Rounding is half-even on the exact binary value and trailing zeros are
    dropped, so ``3.0`` renders as ``"3"`` and ``3.14159`` as ``"3.14"``.
    Scientific notation is never used.
    """

    if precision < 0:
        raise ValueError("precision must be >= 0")
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    exact = Decimal(value)
    with localcontext() as ctx:
        # wide enough for every finite double
        ctx.prec = 400 + precision
        rounded = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_EVEN)
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_matrix(matrix: Matrix, precision: int = DEFAULT_PRECISION) -> str:
    """Render ``matrix`` as space-separated values, one row per line."""

    n, m = matrix.dimensions()
    return "\n".join(
        " ".join(format_value(matrix[x, y], precision) for y in range(m))
        for x in range(n)
    )


__all__ = ["DEFAULT_PRECISION", "format_matrix", "format_value"]
