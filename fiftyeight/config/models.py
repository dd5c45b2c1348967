"""
Application configuration model for fiftyeight.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fiftyeight.paths import get_global_folder, get_settings_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """
    Application-level settings for the configuration host.

    These describe where settings live and how the host logs; the watchface
    settings themselves are in the settings file.
    """

    global_folder: Optional[Path] = None
    """fiftyeight home folder. Resolved from FIFTYEIGHT_HOME or ~/.fiftyeight if None."""

    settings_file: Optional[Path] = None
    """Persisted settings file. Defaults to <global_folder>/settings.json."""

    log_level: str = "INFO"
    """Log level name."""

    log_file: Optional[Path] = None
    """Optional log file path."""

    config_path: Optional[Path] = None
    """Path of the file this config was loaded from, if any."""

    def __post_init__(self) -> None:
        self.global_folder = get_global_folder(self.global_folder)
        if self.settings_file is None:
            self.settings_file = get_settings_path(self.global_folder)
        else:
            self.settings_file = Path(self.settings_file)
        if self.log_file is not None:
            self.log_file = Path(self.log_file)
        self.log_level = str(self.log_level or "INFO").strip().upper()

    def validate(self) -> None:
        """Validate configuration values."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")
        if self.settings_file is None or not str(self.settings_file).strip():
            raise ValueError("settings_file cannot be empty")
