"""Tests for value and matrix formatting."""

import pytest

from matcalc.core import Matrix, format_matrix, format_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (3.0, "3"),
        (3.14159, "3.14"),
        (0.5, "0.5"),
        (-2.0, "-2"),
        (1234.5, "1234.5"),
        (0.125, "0.12"),
        (0.375, "0.38"),
        (2.675, "2.67"),
        (1e20, "100000000000000000000"),
        (-0.001, "-0"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_precision_is_explicit():
    assert format_value(3.14159, precision=4) == "3.1416"
    assert format_value(2.5, precision=0) == "2"
    assert format_value(3.5, precision=0) == "4"


def test_format_value_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_value(1.0, precision=-1)


def test_format_value_non_finite():
    assert format_value(float("nan")) == "NaN"
    assert format_value(float("inf")) == "∞"
    assert format_value(float("-inf")) == "-∞"


def test_format_matrix():
    m = Matrix([[1, 2.5], [3.333, -4]])
    assert format_matrix(m) == "1 2.5\n3.33 -4"
