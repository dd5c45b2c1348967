"""
Persisted settings mapping for a settings schema.

The mapping is a flat ``{toggle key: bool}`` dict. It is seeded from schema
defaults (overlaid with any persisted values) and replaced wholesale on every
submit.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from fiftyeight.logging import get_logger
from fiftyeight.paths import ensure_parent_folder
from fiftyeight.schema import SettingsSchema, get_schema

from .models import WatchfaceSettings

logger = get_logger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "on", "y"}
_FALSE_STRINGS = {"false", "0", "no", "off", "n"}


class SettingsError(ValueError):
    """Raised when a settings payload or settings file is invalid."""


def coerce_bool(value: Any) -> bool:
    """
    Parse a boolean from CLI or text input.

    Accepts booleans, 0/1 integers, and the strings
    true/false, yes/no, on/off, y/n, 1/0 (case-insensitive).

    Raises:
        SettingsError: If the value is not recognizably boolean.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise SettingsError(f"Not a boolean value: {value!r}")


def seed_settings(
    schema: SettingsSchema,
    persisted: Optional[Mapping[str, Any]] = None,
) -> Dict[str, bool]:
    """
    Build the initial settings mapping.

    Starts from schema defaults and overlays persisted values for known keys.
    Unknown persisted keys are dropped.

    Args:
        schema: Settings schema
        persisted: Previously persisted mapping, if any

    Returns:
        Mapping in schema display order
    """
    values = schema.defaults()
    if not persisted:
        return values

    for key, value in persisted.items():
        if key not in values:
            logger.warning("Ignoring unknown persisted setting: %s", key)
            continue
        if not isinstance(value, bool):
            logger.warning("Ignoring non-boolean persisted value for %s: %r", key, value)
            continue
        values[key] = value
    return values


def validate_payload(schema: SettingsSchema, payload: Mapping[str, Any]) -> Dict[str, bool]:
    """
    Validate a submitted settings payload against the schema.

    The payload must contain exactly the schema's toggle keys, each with a
    boolean value.

    Returns:
        New mapping ordered by schema display order

    Raises:
        SettingsError: Listing every missing, unknown or non-boolean key.
    """
    if not isinstance(payload, Mapping):
        raise SettingsError(f"Settings payload must be a mapping, got {type(payload).__name__}")

    expected = schema.keys()
    problems: list[str] = []

    missing = [key for key in expected if key not in payload]
    if missing:
        problems.append(f"missing keys: {', '.join(missing)}")

    unknown = sorted(str(key) for key in payload if key not in expected)
    if unknown:
        problems.append(f"unknown keys: {', '.join(unknown)}")

    wrong_type = [
        key for key in expected
        if key in payload and not isinstance(payload[key], bool)
    ]
    if wrong_type:
        problems.append(f"non-boolean values: {', '.join(wrong_type)}")

    if problems:
        raise SettingsError("Invalid settings payload: " + "; ".join(problems))

    return {key: payload[key] for key in expected}


def load_settings_file(path: Path) -> Dict[str, Any]:
    """
    Read a persisted settings mapping from JSON or YAML.

    Returns an empty dict when the file does not exist.

    Raises:
        SettingsError: If the file cannot be parsed or is not a mapping.
    """
    if not path.exists():
        return {}

    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")
    try:
        if suffix in {".yaml", ".yml"}:
            raw = yaml.safe_load(content) or {}
        elif suffix == ".json":
            raw = json.loads(content) if content.strip() else {}
        else:
            raise SettingsError(
                f"Unsupported settings format: {suffix}. Use .json, .yaml, or .yml"
            )
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SettingsError(f"Could not parse settings file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return raw


def save_settings_file(values: Mapping[str, bool], path: Path) -> None:
    """Write a settings mapping as JSON or YAML (by suffix)."""
    ensure_parent_folder(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(dict(values), indent=2) + "\n", encoding="utf-8")
    elif suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(dict(values), sort_keys=False), encoding="utf-8")
    else:
        raise SettingsError(
            f"Unsupported settings format: {suffix}. Use .json, .yaml, or .yml"
        )


class SettingsStore:
    """
    Owns the current settings mapping and its settings file.

    Example:
        >>> store = SettingsStore(Path("settings.json"))
        >>> store.current["DarkMode"]
        False
        >>> store.set_value("DarkMode", True)
    """

    def __init__(self, path: Path | str, schema: Optional[SettingsSchema] = None) -> None:
        self.path = Path(path).expanduser().resolve()
        self.schema = schema if schema is not None else get_schema()
        self._current: Optional[Dict[str, bool]] = None

    def load(self) -> Dict[str, bool]:
        """(Re)load the mapping from disk, seeded from schema defaults."""
        persisted = load_settings_file(self.path)
        self._current = seed_settings(self.schema, persisted)
        logger.debug("Loaded settings from %s: %s", self.path, self._current)
        return dict(self._current)

    @property
    def current(self) -> Dict[str, bool]:
        """Copy of the current mapping (loaded on first access)."""
        if self._current is None:
            self.load()
        return dict(self._current or {})

    def submit(self, payload: Mapping[str, Any]) -> Dict[str, bool]:
        """
        Validate and persist a submitted mapping, replacing the current one.

        The current mapping is untouched when validation fails.
        """
        values = validate_payload(self.schema, payload)
        save_settings_file(values, self.path)
        self._current = values
        logger.info("Saved settings to %s", self.path)
        return dict(values)

    def set_value(self, key: str, value: Any) -> Dict[str, bool]:
        """Replace a single toggle value and persist."""
        if self.schema.find_toggle(key) is None:
            raise SettingsError(f"Unknown setting: {key}")
        values = self.current
        values[key] = coerce_bool(value)
        return self.submit(values)

    def reset(self) -> Dict[str, bool]:
        """Restore schema defaults and persist."""
        return self.submit(self.schema.defaults())

    def watchface_settings(self) -> WatchfaceSettings:
        """Return the current mapping as a ``WatchfaceSettings``."""
        return WatchfaceSettings.from_mapping(self.current)
