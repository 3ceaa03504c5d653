"""Persisted log level for matcalc loggers.

The level lives in ``logging.json`` under the config directory, or in the
file named by ``MATCALC_LOG_CONFIG``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from matcalc.config.store import read_json, resolve_path, write_json

LOG_CONFIG_ENV_VAR = "MATCALC_LOG_CONFIG"

PathArg = Optional[os.PathLike[str] | str]


def _resolve_config_path(config_file: PathArg = None) -> Path:
    return resolve_path(config_file, LOG_CONFIG_ENV_VAR, "logging.json")


def load_config(config_file: PathArg = None) -> Dict[str, Any]:
    """Return the logging config; unreadable files count as empty."""

    return read_json(_resolve_config_path(config_file))


def save_config(config: Dict[str, Any], config_file: PathArg = None) -> Path:
    return write_json(_resolve_config_path(config_file), config)


def _normalize_level(level: str | int) -> tuple[str, int]:
    """Coerce ``level`` into a ``(name, value)`` pair.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if not isinstance(name, str) or name.startswith("Level "):
            name = str(level)
        return name, level

    name = str(level).upper()
    value = logging.getLevelName(name)
    if isinstance(value, int):
        return name, value
    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(config_file: PathArg = None) -> Optional[int]:
    """Return the persisted numeric level, or ``None`` when unset or invalid."""

    value = load_config(config_file).get("log_level")
    if value is None:
        return None
    try:
        return _normalize_level(value)[1]
    except ValueError:
        return None


def save_log_level(level: str | int, config_file: PathArg = None) -> Path:
    name, _ = _normalize_level(level)
    config = load_config(config_file)
    config["log_level"] = name
    return save_config(config, config_file)


__all__ = [
    "load_config",
    "save_config",
    "load_log_level",
    "save_log_level",
]
