"""User configuration: file locations and display settings."""

from .settings import DisplaySettings, load_settings, save_settings, settings_path
from .store import config_dir, read_json, resolve_path, write_json

__all__ = [
    "DisplaySettings",
    "config_dir",
    "load_settings",
    "read_json",
    "resolve_path",
    "save_settings",
    "settings_path",
    "write_json",
]
