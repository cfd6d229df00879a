"""Matrix subcommands for the matrixutil CLI.

Matrix arguments are either paths to ``.json``/``.csv``/``.tsv`` files or
inline JSON literals such as ``'[[1, 2], [3, 4]]'``.
"""

import json
import random

from matrixutil import ops
from matrixutil.io import load_matrix, write_matrix
from matrixutil.logging import get_logger

logger = get_logger(__file__)

ACTIVATIONS = {
    "sigmoid": ops.sigmoid,
    "sigmoid-deriv": ops.sigmoid_deriv,
    "relu": ops.relu,
    "relu-deriv": ops.relu_deriv,
}

ELEMENTWISE = {
    "add": ops.element_add,
    "subtract": ops.element_subtract,
    "hadamard": ops.element_multiply,
}


def _add_output_options(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--display", metavar="NAME", help="Print as a bordered table labelled NAME")
    group.add_argument("--output", metavar="PATH", help="Write the result to a .json/.csv/.tsv file")


def register_subcommands(subparsers):
    """Register matrix subcommands on the provided ``argparse`` object."""

    multiply_parser = subparsers.add_parser("multiply", help="Matrix product A x B")
    multiply_parser.add_argument("a", help="Left matrix")
    multiply_parser.add_argument("b", help="Right matrix")
    _add_output_options(multiply_parser)

    for name in ELEMENTWISE:
        parser = subparsers.add_parser(name, help=f"Element-wise {name} of A and B")
        parser.add_argument("a", help="Left matrix")
        parser.add_argument("b", help="Right matrix")
        _add_output_options(parser)

    transpose_parser = subparsers.add_parser("transpose", help="Transpose A")
    transpose_parser.add_argument("a", help="Matrix")
    _add_output_options(transpose_parser)

    scalar_parser = subparsers.add_parser("scalar", help="Multiply every cell of A by X")
    scalar_parser.add_argument("x", type=float, help="Scale factor")
    scalar_parser.add_argument("a", help="Matrix")
    _add_output_options(scalar_parser)

    sse_parser = subparsers.add_parser("sse", help="Half sum of squared error")
    sse_parser.add_argument("actual", help="Actual values")
    sse_parser.add_argument("expected", help="Expected values")

    zero_parser = subparsers.add_parser("zero", help="Zero matrix of ROWS x COLS")
    zero_parser.add_argument("rows", type=int)
    zero_parser.add_argument("cols", type=int)
    _add_output_options(zero_parser)

    random_parser = subparsers.add_parser("random", help="Uniform [-1, 1) matrix of ROWS x COLS")
    random_parser.add_argument("rows", type=int)
    random_parser.add_argument("cols", type=int)
    random_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    _add_output_options(random_parser)

    apply_parser = subparsers.add_parser("apply", help="Apply an activation to every cell")
    apply_parser.add_argument("function", choices=sorted(ACTIVATIONS))
    apply_parser.add_argument("a", help="Matrix")
    _add_output_options(apply_parser)

    colors_parser = subparsers.add_parser("colors", help="Map every weight of A to an rgba color")
    colors_parser.add_argument("a", help="Matrix")
    colors_parser.add_argument("--display", metavar="NAME", help="Print as a bordered table labelled NAME")


def _emit(result, args):
    if getattr(args, "display", None):
        ops.display(args.display, result)
    elif getattr(args, "output", None):
        path = write_matrix(result, args.output)
        logger.info("wrote %s result to %s", args.subcommand, path)
    else:
        print(json.dumps(result))


def dispatch(args):
    """Execute the matrix command associated with ``args.subcommand``."""

    logger.debug("matrix %s", args.subcommand)

    if args.subcommand == "multiply":
        result = ops.multiply(load_matrix(args.a), load_matrix(args.b))
    elif args.subcommand in ELEMENTWISE:
        result = ELEMENTWISE[args.subcommand](load_matrix(args.a), load_matrix(args.b))
    elif args.subcommand == "transpose":
        result = ops.transpose(load_matrix(args.a))
    elif args.subcommand == "scalar":
        result = ops.scalar(args.x, load_matrix(args.a))
    elif args.subcommand == "sse":
        print(ops.sum_squared_error(load_matrix(args.actual), load_matrix(args.expected)))
        return
    elif args.subcommand == "zero":
        result = ops.generate_zero(args.rows, args.cols)
    elif args.subcommand == "random":
        rng = random.Random(args.seed) if args.seed is not None else None
        result = ops.generate_random(args.rows, args.cols, rng=rng)
    elif args.subcommand == "apply":
        result = ops.map_one_to_one(load_matrix(args.a), ACTIVATIONS[args.function])
    elif args.subcommand == "colors":
        result = ops.map_one_to_one(load_matrix(args.a), ops.weight_to_color)
    else:
        logger.error("No handler for subcommand: %s", args.subcommand)
        return

    _emit(result, args)
