"""Matrix operations over nested Python lists.

Matrices are plain row-major ``list[list[T]]`` values. No operation mutates
its inputs; every result is a newly built list.
"""

from .arithmetic import (
    element_add,
    element_multiply,
    element_subtract,
    multiply,
    scalar,
    transpose,
)
from .functions import relu, relu_deriv, sigmoid, sigmoid_deriv, sum_squared_error
from .mapping import map_one_to_one, map_two_to_one
from .render import display, weight_to_color
from .shape import (
    Dimension,
    Matrix,
    generate,
    generate_random,
    generate_zero,
    get_dimension,
    validate_matrix,
)

__all__ = [
    "Dimension",
    "Matrix",
    "display",
    "element_add",
    "element_multiply",
    "element_subtract",
    "generate",
    "generate_random",
    "generate_zero",
    "get_dimension",
    "map_one_to_one",
    "map_two_to_one",
    "multiply",
    "relu",
    "relu_deriv",
    "scalar",
    "sigmoid",
    "sigmoid_deriv",
    "sum_squared_error",
    "transpose",
    "validate_matrix",
    "weight_to_color",
]
