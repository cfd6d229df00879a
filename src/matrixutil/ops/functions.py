"""Activation functions and the squared-error metric."""

from __future__ import annotations

import math
from typing import Sequence

from matrixutil.errors import ShapeMismatchError

from .shape import get_dimension


def sigmoid(x: float) -> float:
    try:
        return 1 / (1 + math.exp(-x))
    except OverflowError:
        # exp(-x) overflows for very negative x (limit 0) or a huge int x (limit 1)
        return 0.0 if x < 0 else 1.0


def sigmoid_deriv(x: float) -> float:
    return sigmoid(x) * (1 - sigmoid(x))


def relu(x: float) -> float:
    if x > 0:
        return x
    return 0


def relu_deriv(x: float) -> float:
    """Slope of :func:`relu`; the derivative at exactly zero is 0."""

    if x > 0:
        return 1
    return 0


def sum_squared_error(
    actual: Sequence[Sequence[float]],
    expected: Sequence[Sequence[float]],
) -> float:
    """Return half the sum of squared differences between two matrices.

    The ``1/2`` factor keeps the gradient with respect to ``actual`` equal to
    ``actual - expected``.

    Raises
    ------
    ShapeMismatchError
        If ``actual`` and ``expected`` differ in dimension.
    """

    left = get_dimension(actual)
    right = get_dimension(expected)
    if left != right:
        raise ShapeMismatchError(left, right)

    rows, cols = left
    result = 0
    for row in range(rows):
        for col in range(cols):
            result += (actual[row][col] - expected[row][col]) ** 2
    return result / 2


__all__ = ["sigmoid", "sigmoid_deriv", "relu", "relu_deriv", "sum_squared_error"]
