# matrixutil/logging/logging.py
"""File and console logging for matrixutil.

All handlers hang off the package logger ``matrixutil``. Modules ask for a
logger with ``get_logger(__file__)`` and receive a child such as
``matrixutil.io.matrix_file`` that propagates to it, so a level set on the
package logger applies everywhere.
"""

import os
import logging
import sys
from pathlib import Path

from .config import load_log_level

PACKAGE_LOGGER = "matrixutil"
LOG_DIR_ENV = "MATRIXUTIL_LOG_DIR"
LOG_FILE_NAME = "matrixutil.log"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers that currently own handlers
_CONFIGURED = set()


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get(LOG_DIR_ENV, Path.home() / ".matrixutil" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / LOG_FILE_NAME


def logger_name(name):
    """Turn a module path like ``.../matrixutil/io/matrix_file.py`` into a dotted name."""

    path = Path(str(name))
    if path.suffix != ".py":
        return str(name)

    parts = path.with_suffix("").parts
    if PACKAGE_LOGGER not in parts:
        return path.stem
    start = len(parts) - 1 - parts[::-1].index(PACKAGE_LOGGER)
    dotted = [part for part in parts[start:] if part != "__init__"]
    return ".".join(dotted)


def _configure(name, level, log_file, log_dir, console, filemode, fmt, datefmt, encoding, propagate):
    logger = logging.getLogger(name)
    if level is None:
        level = load_log_level()
    if level is None:
        level = logging.INFO

    file_path = _resolve_log_file(log_file, log_dir)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers = [logging.FileHandler(file_path, mode=filemode, encoding=encoding)]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = propagate
    _CONFIGURED.add(name)
    return logger


def get_logger(
    name=PACKAGE_LOGGER,
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    fmt=DEFAULT_FORMAT,
    datefmt=DEFAULT_DATEFMT,
    encoding="utf-8",
    propagate=False,
):
    """
    Get a logger, configuring handlers on first use.
    - name: Logger name or a module ``__file__`` (default 'matrixutil')
    - level: Logging level (default: persisted level, else logging.INFO)
    - log_file: File path for logs (default: <log_dir>/matrixutil.log)
    - log_dir: Directory for logs (default: $MATRIXUTIL_LOG_DIR or ~/.matrixutil/logs)
    - console: If True, logs also go to stderr

    Names under ``matrixutil.`` are children: the package logger is configured
    with the remaining options and the child propagates to it.
    """
    name = logger_name(name)
    options = (log_file, log_dir, console, filemode, fmt, datefmt, encoding, propagate)

    if name.startswith(PACKAGE_LOGGER + "."):
        if PACKAGE_LOGGER not in _CONFIGURED:
            _configure(PACKAGE_LOGGER, level, *options)
        return logging.getLogger(name)

    if name in _CONFIGURED:
        return logging.getLogger(name)
    return _configure(name, level, *options)


def reset_logger(name=None):
    """Detach and close handlers so loggers can be reconfigured.

    Parameters
    ----------
    name : str, optional
        Logger to reset. If omitted, every logger configured by
        :func:`get_logger` is reset.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG)
    >>> reset_logger("demo")
    >>> logger = get_logger("demo", level=logging.INFO)
    """
    names = list(_CONFIGURED) if name is None else [logger_name(name)]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _CONFIGURED.discard(n)


def get_configured_level(name=PACKAGE_LOGGER):
    """Return the effective level name of ``name``."""

    level = logging.getLogger(logger_name(name)).getEffectiveLevel()
    return logging.getLevelName(level)
