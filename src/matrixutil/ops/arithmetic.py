"""Matrix arithmetic built on the mapping primitives."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from matrixutil.errors import DimensionMismatchError

from .mapping import map_one_to_one, map_two_to_one
from .shape import Matrix, generate, generate_zero, get_dimension

T = TypeVar("T")

Numeric = Sequence[Sequence[float]]


def element_add(m1: Numeric, m2: Numeric) -> List[List[float]]:
    return map_two_to_one(m1, m2, lambda val1, val2: val1 + val2)


def element_subtract(m1: Numeric, m2: Numeric) -> List[List[float]]:
    return map_two_to_one(m1, m2, lambda val1, val2: val1 - val2)


def element_multiply(m1: Numeric, m2: Numeric) -> List[List[float]]:
    """Hadamard (cell by cell) product of two equally shaped matrices."""

    return map_two_to_one(m1, m2, lambda val1, val2: val1 * val2)


def scalar(x: float, m: Numeric) -> List[List[float]]:
    """Multiply every cell of ``m`` by ``x``."""

    return map_one_to_one(m, lambda val: x * val)


def transpose(m: Sequence[Sequence[T]]) -> Matrix[T]:
    """Return the transpose of ``m``.

    Parameters
    ----------
    m:
        Matrix represented as a sequence of sequences. Cells may be of any
        type.
    """

    rows, cols = get_dimension(m)
    return generate(cols, rows, lambda row, col: m[col][row])


def multiply(m1: Numeric, m2: Numeric) -> List[List[float]]:
    """Matrix product of ``m1`` and ``m2``.

    Each output cell is accumulated from zero over the shared index, with
    rows of ``m1`` outermost and the shared index innermost, so the floating
    point summation order is fixed.

    Raises
    ------
    DimensionMismatchError
        If the column count of ``m1`` differs from the row count of ``m2``.
    """

    m1_rows, m1_cols = get_dimension(m1)
    m2_rows, m2_cols = get_dimension(m2)
    if m1_cols != m2_rows:
        raise DimensionMismatchError((m1_rows, m1_cols), (m2_rows, m2_cols))

    result = generate_zero(m1_rows, m2_cols)
    for m1_row in range(m1_rows):
        for m2_col in range(m2_cols):
            total = 0
            for m1_col in range(m1_cols):
                total += m1[m1_row][m1_col] * m2[m1_col][m2_col]
            result[m1_row][m2_col] = total
    return result


__all__ = [
    "element_add",
    "element_subtract",
    "element_multiply",
    "scalar",
    "transpose",
    "multiply",
]
