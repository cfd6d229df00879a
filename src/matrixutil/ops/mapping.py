"""Element-wise traversal primitives.

Every arithmetic operation in :mod:`matrixutil.ops.arithmetic` is expressed
through one of these two functions.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from matrixutil.errors import ShapeMismatchError

from .shape import Matrix, generate, get_dimension

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def map_one_to_one(m: Sequence[Sequence[A]], operation: Callable[[A], B]) -> Matrix[B]:
    """Apply ``operation`` to every cell of ``m``."""

    rows, cols = get_dimension(m)
    return generate(rows, cols, lambda row, col: operation(m[row][col]))


def map_two_to_one(
    m1: Sequence[Sequence[A]],
    m2: Sequence[Sequence[B]],
    operation: Callable[[A, B], C],
) -> Matrix[C]:
    """Combine ``m1`` and ``m2`` cell by cell with ``operation``.

    Raises
    ------
    ShapeMismatchError
        If the two matrices do not have the same dimension.
    """

    left = get_dimension(m1)
    right = get_dimension(m2)
    if left != right:
        raise ShapeMismatchError(left, right)

    rows, cols = left
    return generate(rows, cols, lambda row, col: operation(m1[row][col], m2[row][col]))


__all__ = ["map_one_to_one", "map_two_to_one"]
