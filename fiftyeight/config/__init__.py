"""
Configuration management for fiftyeight.
"""

from .models import AppConfig, LOG_LEVELS
from .loader import (
    build_config_from_raw,
    default_config,
    load_config_from_file,
)

__all__ = [
    "AppConfig",
    "LOG_LEVELS",
    "build_config_from_raw",
    "default_config",
    "load_config_from_file",
]
