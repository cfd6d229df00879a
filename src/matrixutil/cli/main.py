# matrixutil/cli/main.py
import argparse
import sys

from matrixutil.errors import MatrixError
from matrixutil.cli import logging as logging_cli, matrix
from matrixutil.logging import get_logger


def main(argv=None):

    parser = argparse.ArgumentParser(prog="matrixutil", description="matrixutil CLI toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    matrix_parser = subparsers.add_parser("matrix", help="Matrix operations")
    matrix_subparsers = matrix_parser.add_subparsers(dest="subcommand", required=True)
    matrix.register_subcommands(matrix_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(
        dest="subcommand", required=True
    )
    logging_cli.register_subcommands(logging_subparsers)

    args = parser.parse_args(argv)

    try:
        if args.command == "matrix":
            matrix.dispatch(args)
        elif args.command == "logging":
            logging_cli.dispatch(args)
    except MatrixError as exc:
        get_logger(__file__).error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
