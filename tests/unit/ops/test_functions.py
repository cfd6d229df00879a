"""Tests for activations and the squared-error metric."""

import math

import pytest

from matrixutil.errors import ShapeMismatchError
from matrixutil.ops.functions import (
    relu,
    relu_deriv,
    sigmoid,
    sigmoid_deriv,
    sum_squared_error,
)


def test_sigmoid_midpoint():
    assert sigmoid(0) == 0.5


def test_sigmoid_matches_closed_form():
    for x in (-3.0, -0.5, 0.25, 2.0):
        assert sigmoid(x) == pytest.approx(1 / (1 + math.exp(-x)))


def test_sigmoid_saturates_without_overflow():
    assert sigmoid(-1000) == 0.0
    assert sigmoid(1000) == 1.0
    assert sigmoid(10**400) == 1.0
    assert sigmoid(-(10**400)) == 0.0
    assert sigmoid_deriv(10**400) == 0.0


def test_sigmoid_deriv_is_built_from_sigmoid():
    for x in (-2.0, 0.0, 1.5):
        assert sigmoid_deriv(x) == sigmoid(x) * (1 - sigmoid(x))
    assert sigmoid_deriv(0) == 0.25


def test_relu():
    assert relu(-3) == 0
    assert relu(0) == 0
    assert relu(2.5) == 2.5


def test_relu_deriv():
    assert relu_deriv(2) == 1
    assert relu_deriv(0) == 0
    assert relu_deriv(-1) == 0


def test_sum_squared_error_halves_the_sum():
    actual = [[1, 2], [3, 4]]
    expected = [[0, 2], [3, 6]]
    # (1 + 0 + 0 + 4) / 2
    assert sum_squared_error(actual, expected) == 2.5


def test_sum_squared_error_of_identical_matrices_is_zero():
    matrix = [[0.5, -1.25], [3.0, 7.0]]
    assert sum_squared_error(matrix, matrix) == 0


def test_sum_squared_error_rejects_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        sum_squared_error([[1, 2]], [[1], [2]])
