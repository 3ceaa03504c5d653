"""Location and JSON persistence of per-user calculator files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional


def config_dir() -> Path:
    """Return the directory holding matcalc's user files.

    ``MATCALC_CONFIG_DIR`` overrides the default of ``~/.matcalc``.
    """

    raw = os.environ.get("MATCALC_CONFIG_DIR")
    if raw and raw.strip():
        return Path(raw).expanduser()
    return Path.home() / ".matcalc"


def resolve_path(
    explicit: Optional[os.PathLike[str] | str],
    env_var: str,
    filename: str,
) -> Path:
    """Pick ``explicit``, then ``$env_var``, then ``config_dir() / filename``."""

    if explicit is not None:
        return Path(explicit)
    raw = os.environ.get(env_var)
    if raw and raw.strip():
        return Path(raw).expanduser()
    return config_dir() / filename


def read_json(path: Path) -> Dict[str, Any]:
    """Return the JSON object stored at ``path``.

    Missing, unreadable or non-object files read as ``{}``.
    """

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def write_json(path: Path, data: Dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return path
