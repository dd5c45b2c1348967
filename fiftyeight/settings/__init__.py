"""
Persisted settings for fiftyeight.
"""

from .models import WatchfaceSettings
from .store import (
    SettingsError,
    SettingsStore,
    coerce_bool,
    load_settings_file,
    save_settings_file,
    seed_settings,
    validate_payload,
)

__all__ = [
    "WatchfaceSettings",
    "SettingsError",
    "SettingsStore",
    "coerce_bool",
    "load_settings_file",
    "save_settings_file",
    "seed_settings",
    "validate_payload",
]
