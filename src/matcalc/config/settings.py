"""Persisted display settings for the interactive calculator."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .store import read_json, resolve_path, write_json

SETTINGS_ENV_VAR = "MATCALC_SETTINGS"


class DisplaySettings(BaseModel):
    """User-tunable output options.

    ``precision`` is the maximum number of fraction digits shown for each
    value; trailing zeros are always dropped.
    """

    model_config = ConfigDict(extra="ignore")

    precision: int = Field(2, ge=0, le=15)


def settings_path(path: Optional[os.PathLike[str] | str] = None) -> Path:
    return resolve_path(path, SETTINGS_ENV_VAR, "settings.json")


def load_settings(path: Optional[os.PathLike[str] | str] = None) -> DisplaySettings:
    """Load settings, falling back to defaults when the file is absent.

    Raises
    ------
    pydantic.ValidationError
        If the file holds values outside their allowed range.
    """

    return DisplaySettings.model_validate(read_json(settings_path(path)))


def save_settings(
    settings: DisplaySettings,
    path: Optional[os.PathLike[str] | str] = None,
) -> Path:
    return write_json(settings_path(path), settings.model_dump())
