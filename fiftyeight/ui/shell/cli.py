"""
Single-shot CLI commands for schema output and settings management.
"""

from __future__ import annotations

import json
from pathlib import Path

from fiftyeight.config import AppConfig
from fiftyeight.logging import get_logger
from fiftyeight.schema import dump_schema, get_schema
from fiftyeight.settings import SettingsError, SettingsStore, load_settings_file

logger = get_logger(__name__)


def run_schema(args) -> int:
    """Print the settings schema in the requested format."""
    fmt = getattr(args, "format", None) or "json"
    print(dump_schema(get_schema(), fmt), end="")
    return 0


def run_settings(args, config: AppConfig) -> int:
    """Run settings command with show/set/reset/submit subcommands."""
    store = SettingsStore(config.settings_file)
    command = getattr(args, "settings_command", None)

    try:
        if command == "show":
            return run_show_cli(store)
        if command == "set":
            return run_set_cli(store, args.key, args.value)
        if command == "reset":
            return run_reset_cli(store)
        if command == "submit":
            return run_submit_cli(store, Path(args.file))
    except SettingsError as exc:
        logger.error(f"Settings command failed: {exc}")
        print(f"Error: {exc}")
        return 1

    print("Missing settings subcommand. Use `fiftyeight settings --help` for options.")
    return 2


def _print_mapping(values: dict[str, bool]) -> None:
    print(json.dumps(values, indent=2))


def run_show_cli(store: SettingsStore) -> int:
    """Print the current settings mapping as JSON."""
    _print_mapping(store.current)
    return 0


def run_set_cli(store: SettingsStore, key: str, value: str) -> int:
    """Set a single toggle value and persist."""
    values = store.set_value(key, value)
    logger.info(f"Set {key} = {values[key]}")
    _print_mapping(values)
    return 0


def run_reset_cli(store: SettingsStore) -> int:
    """Restore schema defaults and persist."""
    values = store.reset()
    logger.info("Settings reset to defaults")
    _print_mapping(values)
    return 0


def run_submit_cli(store: SettingsStore, payload_path: Path) -> int:
    """Replace the settings mapping with the contents of a JSON/YAML payload file."""
    payload_path = payload_path.expanduser().resolve()
    if not payload_path.exists():
        raise SettingsError(f"Payload file not found: {payload_path}")

    payload = load_settings_file(payload_path)
    values = store.submit(payload)
    _print_mapping(values)
    return 0
