"""Exceptions raised by :mod:`matrixutil`.

Every error derives from :class:`MatrixError`, itself a :class:`ValueError`,
so callers that only care about bad numeric input can catch ``ValueError``.
"""

from __future__ import annotations

from typing import Tuple

Dimension = Tuple[int, int]


class MatrixError(ValueError):
    """Base class for matrix errors."""


class ShapeMismatchError(MatrixError):
    """Element-wise operands do not share the same dimension."""

    def __init__(self, left: Dimension, right: Dimension):
        self.left = left
        self.right = right
        super().__init__(
            f"Matrix size mismatch: {left[0]}x{left[1]} vs {right[0]}x{right[1]}"
        )


class DimensionMismatchError(MatrixError):
    """Inner dimensions of a matrix product disagree."""

    def __init__(self, left: Dimension, right: Dimension):
        self.left = left
        self.right = right
        super().__init__(
            "Matrix multiply size mismatch: "
            f"{left[0]}x{left[1]} cannot multiply {right[0]}x{right[1]}"
        )


class InvalidShapeError(MatrixError):
    """Input is not a rectangular grid, or a requested size is negative."""


class MatrixFileError(MatrixError):
    """A matrix could not be loaded from a file or literal."""


__all__ = [
    "MatrixError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "InvalidShapeError",
    "MatrixFileError",
]
