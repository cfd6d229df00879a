"""Core package for the matrixutil project.

This top-level module re-exports the matrix operations from
:mod:`matrixutil.ops` together with the error types in
:mod:`matrixutil.errors`.
"""

from .errors import (
    DimensionMismatchError,
    InvalidShapeError,
    MatrixError,
    MatrixFileError,
    ShapeMismatchError,
)
from .ops import *  # noqa: F401,F403
from .ops import __all__ as _ops_all

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "InvalidShapeError",
    "MatrixError",
    "MatrixFileError",
    "ShapeMismatchError",
    *_ops_all,
]
