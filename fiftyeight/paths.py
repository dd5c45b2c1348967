"""
Global path helpers for fiftyeight.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


GLOBAL_FOLDER_ENV_VAR = "FIFTYEIGHT_HOME"
SETTINGS_FILENAME = "settings.json"
CONFIG_FILENAME = "config.json"


def get_global_folder(override: Optional[str | Path] = None) -> Path:
    """
    Resolve the global fiftyeight folder path.

    Priority:
    1. Explicit override argument
    2. FIFTYEIGHT_HOME environment variable
    3. <home>/.fiftyeight
    """
    candidate: str | Path | None = override
    if candidate is None:
        candidate = os.environ.get(GLOBAL_FOLDER_ENV_VAR)
    if candidate is None:
        candidate = Path.home() / ".fiftyeight"
    return Path(candidate).expanduser().resolve()


def get_settings_path(global_folder: Optional[str | Path] = None) -> Path:
    """Return the default persisted settings file path."""
    return get_global_folder(global_folder) / SETTINGS_FILENAME


def get_config_path(global_folder: Optional[str | Path] = None) -> Path:
    """Return the default application config file path."""
    return get_global_folder(global_folder) / CONFIG_FILENAME


def resolve_relative_path(path: str | Path, base: Optional[str | Path] = None) -> Path:
    """
    Resolve a possibly-relative path against ``base`` (or the global folder).
    """
    value = Path(path).expanduser()
    if value.is_absolute():
        return value.resolve()
    root = Path(base).expanduser() if base is not None else get_global_folder()
    return (root / value).resolve()


def ensure_parent_folder(path: str | Path) -> Path:
    """Create the parent folder of ``path`` if needed and return the path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target
