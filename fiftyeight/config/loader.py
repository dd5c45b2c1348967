"""
Configuration loader for fiftyeight.

Handles loading configuration from JSON/YAML files and converting
to the typed AppConfig model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from fiftyeight.paths import resolve_relative_path

from .models import AppConfig


def load_raw_config(path: Path) -> Dict[str, Any]:
    """
    Load raw configuration from JSON or YAML file.

    Also loads environment variables from .env file if present.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Dictionary with raw configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
    """
    load_dotenv()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        config = yaml.safe_load(content) or {}
    elif suffix == ".json":
        config = json.loads(content) if content.strip() else {}
    else:
        raise ValueError(
            f"Unsupported config format: {suffix}. "
            f"Use .json, .yaml, or .yml"
        )

    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain an object")
    return config


def build_config_from_raw(raw: Dict[str, Any], path: Path | str) -> AppConfig:
    """
    Build and validate AppConfig from raw configuration.

    Relative ``settings_file`` and ``log_file`` paths resolve against the
    config file's directory.

    Args:
        raw: Raw config dictionary
        path: Config file path

    Returns:
        Validated AppConfig instance
    """
    config_path = Path(path).expanduser().resolve()
    base = config_path.parent

    global_folder = raw.get("global_folder")
    settings_file = raw.get("settings_file")
    log_file = raw.get("log_file")

    config = AppConfig(
        global_folder=resolve_relative_path(global_folder, base) if global_folder else None,
        settings_file=resolve_relative_path(settings_file, base) if settings_file else None,
        log_level=raw.get("log_level", "INFO"),
        log_file=resolve_relative_path(log_file, base) if log_file else None,
        config_path=config_path,
    )
    config.validate()
    return config


def load_config_from_file(path: Path | str) -> AppConfig:
    """
    Load and validate configuration from file.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If configuration is invalid
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()

    raw = load_raw_config(path)
    return build_config_from_raw(raw, path)


def default_config() -> AppConfig:
    """Build a config without a file (FIFTYEIGHT_HOME or ~/.fiftyeight)."""
    load_dotenv()
    config = AppConfig()
    config.validate()
    return config

