"""
Shared pytest fixtures for fiftyeight tests.

Every test runs with FIFTYEIGHT_HOME pointed at a temporary folder so no
test touches the real home directory.
"""

import json
import pytest
from pathlib import Path
from typing import Dict

from fiftyeight.schema import SettingsSchema, get_schema
from fiftyeight.settings import SettingsStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point FIFTYEIGHT_HOME at a per-test folder."""
    home = tmp_path / "fiftyeight_home"
    monkeypatch.setenv("FIFTYEIGHT_HOME", str(home))
    return home


# -----------------------------------------------------------------------------
# Schema / Settings Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def schema() -> SettingsSchema:
    return get_schema()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def store(settings_path: Path, schema: SettingsSchema) -> SettingsStore:
    return SettingsStore(settings_path, schema)


@pytest.fixture
def sample_payload() -> Dict[str, bool]:
    """A complete, valid submitted mapping."""
    return {
        "DarkMode": True,
        "ShowAmPm": False,
        "Use24HourFormat": True,
        "UseTwoLetterDay": False,
    }


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """
    Create a temporary JSON config file whose settings file lives in tmp_path.
    """
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"settings_file": "data/settings.json", "log_level": "debug"}, indent=2),
        encoding="utf-8",
    )
    return config_path
