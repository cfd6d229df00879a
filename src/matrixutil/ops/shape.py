"""Shape introspection and matrix generators."""

from __future__ import annotations

import random
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple, TypeVar

from matrixutil.errors import InvalidShapeError

T = TypeVar("T")

Matrix = List[List[T]]
Dimension = Tuple[int, int]


class RandomSource(Protocol):
    def random(self) -> float: ...


def validate_matrix(m: Any) -> Dimension:
    """Return the dimension of ``m`` or raise :class:`InvalidShapeError`.

    An empty outer sequence is a valid ``0x0`` matrix. Every row must be a
    sequence of the same length as the first row.
    """

    if isinstance(m, (str, bytes)) or not isinstance(m, Sequence):
        raise InvalidShapeError(f"Matrix must be a sequence of rows, got {type(m).__name__}")
    if len(m) == 0:
        return 0, 0

    cols = None
    for index, row in enumerate(m):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidShapeError(f"Row {index} is not a sequence: {type(row).__name__}")
        if cols is None:
            cols = len(row)
        elif len(row) != cols:
            raise InvalidShapeError(
                f"Row {index} has {len(row)} columns, expected {cols}"
            )
    return len(m), cols


def get_dimension(m: Sequence[Sequence[T]]) -> Dimension:
    """Return ``(rows, cols)`` for ``m``."""

    return validate_matrix(m)


def generate(rows: int, cols: int, values: Callable[[int, int], T]) -> Matrix[T]:
    """Build a ``rows x cols`` matrix whose cell (r, c) is ``values(r, c)``.

    ``values`` is called once per cell in row-major order.
    """

    if rows < 0 or cols < 0:
        raise InvalidShapeError(f"Matrix size must be non-negative, got {rows}x{cols}")

    m: Matrix[T] = []
    for row in range(rows):
        cells = []
        for col in range(cols):
            cells.append(values(row, col))
        m.append(cells)
    return m


def generate_zero(rows: int, cols: int) -> Matrix[int]:
    return generate(rows, cols, lambda row, col: 0)


def generate_random(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
) -> Matrix[float]:
    """Matrix of independent uniform draws in ``[-1, 1)``.

    Pass ``rng`` (for example ``random.Random(seed)``) for reproducible output;
    the module-level generator is used otherwise.
    """

    source = rng if rng is not None else random
    return generate(rows, cols, lambda row, col: source.random() * 2 - 1)


__all__ = [
    "Matrix",
    "Dimension",
    "RandomSource",
    "validate_matrix",
    "get_dimension",
    "generate",
    "generate_zero",
    "generate_random",
]
