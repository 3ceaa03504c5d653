"""Interactive text menu driving the matrix core.

The loop reads from ``read_line`` (``input`` by default) and writes whole lines
through ``write`` (``print`` by default), so it can be scripted in tests.

Examples
--------
>>> lines = iter(["5", "2 2", "1 2", "3 4", "0"])
>>> run_menu(read_line=lambda prompt="": next(lines), write=lambda text: None)
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from matcalc.core import (
    InconsistentRowLengthError,
    Matrix,
    MatrixError,
    TransposeStrategy,
    add,
    find_inverse,
    format_matrix,
    format_value,
    is_addition_allowed,
    is_multiplication_allowed,
    multiply,
    scale,
)
from matcalc.core.formatting import DEFAULT_PRECISION
from matcalc.logging import get_logger

_module_logger = get_logger(__name__, console=False)

ReadLine = Callable[..., str]
Write = Callable[[str], None]

_WHITESPACE = re.compile(r"\s+")

MAIN_MENU = (
    "1. Add matrices",
    "2. Multiply matrix by a constant",
    "3. Multiply matrices",
    "4. Transpose matrix",
    "5. Calculate a determinant",
    "6. Inverse matrix",
    "0. Exit",
)

TRANSPOSE_MENU = (
    "1. Main diagonal",
    "2. Side diagonal",
    "3. Vertical line",
    "4. Horizontal line",
)

CANNOT_PERFORM = "The operation cannot be performed."
NO_INVERSE = "This matrix doesn't have an inverse."
WRONG_CHOICE = "Wrong choice!"
RESULT_HEADER = "The result is:"


def _split(line: str) -> List[str]:
    return [token for token in _WHITESPACE.split(line.strip()) if token]


def parse_size(line: str) -> Tuple[int, int]:
    """Parse an ``"n m"`` size line into two integers."""

    tokens = _split(line)
    if len(tokens) != 2:
        raise ValueError(f"Expected two integers, got {line!r}")
    n, m = (int(token) for token in tokens)
    return n, m


def parse_row(line: str, columns: int) -> List[float]:
    """Parse one whitespace-separated row of exactly ``columns`` numbers."""

    values = [float(token) for token in _split(line)]
    if len(values) != columns:
        raise InconsistentRowLengthError(
            f"Expected {columns} values, got {len(values)}"
        )
    return values


class MatrixMenu:
    """State for one interactive session.

    ``logger`` receives the warnings for failed menu choices; it defaults to
    this module's file-only logger.
    """

    def __init__(
        self,
        read_line: ReadLine = input,
        write: Write = print,
        precision: int = DEFAULT_PRECISION,
        logger: Optional[logging.Logger] = None,
    ):
        self.read_line = read_line
        self.write = write
        self.precision = precision
        self.logger = logger if logger is not None else _module_logger
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._scale,
            3: self._multiply,
            4: self._transpose,
            5: self._determinant,
            6: self._inverse,
        }

    # -- I/O helpers -------------------------------------------------------

    def read_matrix(self, name: str = "") -> Matrix:
        label = f" {name.strip()}" if name.strip() else ""
        n, m = parse_size(self.read_line(f"Enter size of{label} matrix: "))
        result = Matrix.empty(n, m)
        self.write(f"Enter{label} matrix:")
        for x in range(n):
            for y, value in enumerate(parse_row(self.read_line(), m)):
                result[x, y] = value
        return result

    def print_matrix(self, matrix: Matrix) -> None:
        self.write(RESULT_HEADER)
        self.write(format_matrix(matrix, self.precision))

    # -- actions -----------------------------------------------------------

    def _add(self) -> None:
        m1 = self.read_matrix("first")
        m2 = self.read_matrix("second")
        if is_addition_allowed(m1, m2):
            self.print_matrix(add(m1, m2))
        else:
            self.write(CANNOT_PERFORM)

    def _scale(self) -> None:
        matrix = self.read_matrix()
        constant = float(self.read_line("Enter constant: "))
        self.print_matrix(scale(matrix, constant))

    def _multiply(self) -> None:
        m1 = self.read_matrix("first")
        m2 = self.read_matrix("second")
        if is_multiplication_allowed(m1, m2):
            self.print_matrix(multiply(m1, m2))
        else:
            self.write(CANNOT_PERFORM)

    def _transpose(self) -> None:
        for line in TRANSPOSE_MENU:
            self.write(line)
        strategy = TransposeStrategy.by_number(int(self.read_line("Your choice: ")))
        matrix = self.read_matrix()
        strategy.transpose(matrix)
        self.print_matrix(matrix)

    def _determinant(self) -> None:
        matrix = self.read_matrix()
        if not matrix.is_square():
            self.write(CANNOT_PERFORM)
            return
        self.write(RESULT_HEADER)
        self.write(format_value(matrix.determinant(), self.precision))

    def _inverse(self) -> None:
        matrix = self.read_matrix()
        if not matrix.is_square():
            self.write(CANNOT_PERFORM)
            return
        inverse = find_inverse(matrix)
        if inverse is None:
            self.write(NO_INVERSE)
        else:
            self.print_matrix(inverse)

    # -- loop --------------------------------------------------------------

    def step(self) -> bool:
        """Run one menu round; return ``False`` once the user chose to exit."""

        for line in MAIN_MENU:
            self.write(line)
        raw = self.read_line("Your choice: ")
        try:
            choice = int(raw.strip())
        except ValueError:
            self.write(WRONG_CHOICE)
            return True
        if choice == 0:
            return False

        action = self._actions.get(choice)
        if action is None:
            self.write(WRONG_CHOICE)
            return True

        try:
            action()
        except (MatrixError, ValueError) as exc:
            self.logger.warning("menu choice %s failed: %s", choice, exc)
            self.write(CANNOT_PERFORM)
        return True

    def run(self) -> None:
        try:
            while self.step():
                pass
        except EOFError:
            self.logger.info("input closed, leaving menu")


def run_menu(
    read_line: ReadLine = input,
    write: Write = print,
    precision: int = DEFAULT_PRECISION,
    logger: Optional[logging.Logger] = None,
) -> None:
    MatrixMenu(read_line=read_line, write=write, precision=precision, logger=logger).run()


__all__ = ["MatrixMenu", "parse_row", "parse_size", "run_menu"]
