"""``matrixutil logging`` subcommands: inspect and persist the log level."""

import logging

from matrixutil.logging import get_configured_level, get_logger, reset_logger
from matrixutil.logging.config import clear_log_level, config_path, save_log_level
from matrixutil.logging.logging import _resolve_log_file

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    """Add ``set-level``, ``reset-level``, ``show-level`` and ``show-path``."""

    set_level_parser = subparsers.add_parser("set-level", help="Persist a logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    subparsers.add_parser("reset-level", help="Forget the persisted level (back to INFO)")
    subparsers.add_parser("show-level", help="Show the active logging level")
    subparsers.add_parser("show-path", help="Show the log file and settings file locations")


def _set_level(args):
    level_name = args.level.upper()
    save_log_level(level_name)
    reset_logger()
    get_logger(level=getattr(logging, level_name))


def _reset_level(args):
    if clear_log_level():
        reset_logger()
        get_logger(level=logging.INFO)
    print(get_configured_level())


def _show_level(args):
    print(get_configured_level())


def _show_path(args):
    print(_resolve_log_file().resolve())
    print(config_path().resolve())


HANDLERS = {
    "set-level": _set_level,
    "reset-level": _reset_level,
    "show-level": _show_level,
    "show-path": _show_path,
}


def dispatch(args):
    handler = HANDLERS.get(args.subcommand)
    if handler is None:
        get_logger(__file__).error("No handler for subcommand: %s", args.subcommand)
        return
    handler(args)
