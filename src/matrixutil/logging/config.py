"""Persisted matrixutil settings.

Settings live in one JSON object. The file is ``$MATRIXUTIL_LOG_CONFIG``
when set, else ``logging.json`` inside ``$MATRIXUTIL_CONFIG_DIR`` (default
``~/.matrixutil``). Only ``log_level`` is read by the package today.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

ConfigPath = Optional[Union[str, os.PathLike]]

LOG_LEVEL_KEY = "log_level"


def _env_path(key: str) -> Optional[Path]:
    raw = os.environ.get(key)
    if raw and raw.strip():
        return Path(raw).expanduser()
    return None


def config_path(config_file: ConfigPath = None) -> Path:
    """Resolve the settings file, explicit argument first, then environment."""

    if config_file is not None:
        return Path(config_file)
    explicit = _env_path("MATRIXUTIL_LOG_CONFIG")
    if explicit is not None:
        return explicit
    directory = _env_path("MATRIXUTIL_CONFIG_DIR") or Path.home() / ".matrixutil"
    return directory / "logging.json"


def load_config(config_file: ConfigPath = None) -> Dict[str, Any]:
    """Return the stored settings.

    A missing file, unreadable JSON, or a document that is not an object all
    read as ``{}``.
    """

    path = config_path(config_file)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: ConfigPath = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path


def level_value(level: Union[str, int]) -> Optional[int]:
    """Numeric value of a level name or number, ``None`` if unknown."""

    if isinstance(level, int):
        return level
    candidate = logging.getLevelName(str(level).upper())
    return candidate if isinstance(candidate, int) else None


def load_log_level(config_file: ConfigPath = None) -> Optional[int]:
    value = load_config(config_file).get(LOG_LEVEL_KEY)
    if value is None:
        return None
    return level_value(value)


def save_log_level(level: Union[str, int], config_file: ConfigPath = None) -> Path:
    """Store ``level`` by name and return the settings path.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    numeric = level_value(level)
    if numeric is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    name = logging.getLevelName(numeric)
    if not isinstance(name, str) or name.startswith("Level "):
        name = str(numeric)

    config = load_config(config_file)
    config[LOG_LEVEL_KEY] = name
    return save_config(config, config_file)


def clear_log_level(config_file: ConfigPath = None) -> bool:
    """Drop the stored level; return whether one was present."""

    config = load_config(config_file)
    if LOG_LEVEL_KEY not in config:
        return False
    del config[LOG_LEVEL_KEY]
    save_config(config, config_file)
    return True


__all__ = [
    "config_path",
    "load_config",
    "save_config",
    "load_log_level",
    "save_log_level",
    "clear_log_level",
]
