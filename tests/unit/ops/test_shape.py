"""Tests for matrix construction and shape helpers."""

import random

import pytest

from matrixutil.errors import InvalidShapeError
from matrixutil.ops.shape import (
    generate,
    generate_random,
    generate_zero,
    get_dimension,
    validate_matrix,
)


def test_generate_zero_dimension():
    matrix = generate_zero(2, 3)
    assert get_dimension(matrix) == (2, 3)
    assert matrix == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 4), (4, 1), (3, 3), (5, 0)])
def test_generate_zero_dimension_round_trip(rows, cols):
    assert get_dimension(generate_zero(rows, cols)) == (rows, cols)


def test_generate_zero_rows_is_empty_matrix():
    assert generate_zero(0, 3) == []
    assert get_dimension([]) == (0, 0)


def test_generate_zero_columns_keeps_rows():
    assert generate_zero(2, 0) == [[], []]


def test_generate_calls_value_fn_once_per_cell_in_row_major_order():
    calls = []

    def values(row, col):
        calls.append((row, col))
        return row * 10 + col

    matrix = generate(2, 3, values)

    assert matrix == [[0, 1, 2], [10, 11, 12]]
    assert calls == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_generate_rows_are_independent_lists():
    matrix = generate_zero(2, 2)
    matrix[0][0] = 7
    assert matrix[1][0] == 0


def test_generate_supports_non_numeric_cells():
    assert generate(1, 2, lambda row, col: f"{row}:{col}") == [["0:0", "0:1"]]


def test_generate_rejects_negative_size():
    with pytest.raises(InvalidShapeError):
        generate(-1, 2, lambda row, col: 0)


def test_generate_random_range_and_shape():
    matrix = generate_random(4, 5)
    assert get_dimension(matrix) == (4, 5)
    assert all(-1 <= value < 1 for row in matrix for value in row)


def test_generate_random_is_reproducible_with_injected_rng():
    first = generate_random(3, 3, rng=random.Random(1234))
    second = generate_random(3, 3, rng=random.Random(1234))
    assert first == second


def test_generate_random_maps_unit_draws_onto_signed_range():
    class FixedSource:
        def __init__(self, values):
            self._values = iter(values)

        def random(self):
            return next(self._values)

    matrix = generate_random(1, 3, rng=FixedSource([0.0, 0.5, 0.75]))
    assert matrix == [[-1.0, 0.0, 0.5]]


def test_get_dimension_accepts_tuples():
    assert get_dimension(((1, 2, 3), (4, 5, 6))) == (2, 3)


def test_validate_matrix_rejects_ragged_rows():
    with pytest.raises(InvalidShapeError, match="Row 1"):
        validate_matrix([[1, 2], [3]])


@pytest.mark.parametrize("value", [None, 3, "ab", [1, 2]])
def test_validate_matrix_rejects_non_grids(value):
    with pytest.raises(InvalidShapeError):
        validate_matrix(value)
