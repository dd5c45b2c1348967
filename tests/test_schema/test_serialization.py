from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from fiftyeight.schema import (
    Heading,
    SchemaError,
    SettingsSchema,
    Toggle,
    dump_schema,
    element_from_raw,
    element_to_raw,
    get_schema,
    load_schema,
    parse_schema_text,
    schema_from_raw,
    schema_to_raw,
)

HOST_CONFIG = [
    {"type": "heading", "defaultValue": "fiftyeight Configuration"},
    {"type": "text", "defaultValue": "Customize your watchface appearance and behavior."},
    {
        "type": "section",
        "items": [
            {"type": "heading", "defaultValue": "Display Settings"},
            {
                "type": "toggle",
                "messageKey": "DarkMode",
                "label": "Dark Mode",
                "defaultValue": False,
                "description": "Enable dark mode (white text on black background)",
            },
            {
                "type": "toggle",
                "messageKey": "ShowAmPm",
                "label": "Show AM/PM Indicator",
                "defaultValue": False,
                "description": "Display AM/PM indicator in top left corner",
            },
            {
                "type": "toggle",
                "messageKey": "Use24HourFormat",
                "label": "24-Hour Time Format",
                "defaultValue": False,
                "description": "Use 24-hour format instead of 12-hour format",
            },
            {
                "type": "toggle",
                "messageKey": "UseTwoLetterDay",
                "label": "Two-Letter Day Abbreviations",
                "defaultValue": False,
                "description": "Use 2-letter day abbreviations (SU, MO, etc.) instead of 3-letter",
            },
        ],
    },
    {"type": "submit", "defaultValue": "Save Settings"},
]


def test_schema_to_raw_matches_host_config() -> None:
    assert schema_to_raw(get_schema()) == HOST_CONFIG


def test_raw_round_trip_preserves_fields_and_order() -> None:
    schema = get_schema()
    assert schema_from_raw(schema_to_raw(schema)) == schema


def test_json_and_yaml_round_trip() -> None:
    schema = get_schema()
    assert parse_schema_text(dump_schema(schema, "json"), "json") == schema
    assert parse_schema_text(dump_schema(schema, "yaml"), "yaml") == schema
    assert yaml.safe_load(dump_schema(schema, "yaml")) == HOST_CONFIG


def test_js_module_output() -> None:
    text = dump_schema(get_schema(), "js")
    assert text.startswith("module.exports = [")
    assert text.rstrip().endswith("];")
    assert parse_schema_text(text, "js") == get_schema()


def test_dump_schema_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unsupported schema format"):
        dump_schema(get_schema(), "xml")


def test_toggle_raw_fields() -> None:
    raw = element_to_raw(Toggle(key="K", label="L", default_value=True, description="D"))
    assert raw == {
        "type": "toggle",
        "messageKey": "K",
        "label": "L",
        "defaultValue": True,
        "description": "D",
    }


def test_element_from_raw_errors() -> None:
    with pytest.raises(SchemaError, match="Unknown form element type"):
        element_from_raw({"type": "slider"})
    with pytest.raises(SchemaError, match="missing 'defaultValue'"):
        element_from_raw({"type": "heading"})
    with pytest.raises(SchemaError, match="must be a string"):
        element_from_raw({"type": "text", "defaultValue": 5})
    with pytest.raises(SchemaError, match="'items' list"):
        element_from_raw({"type": "section"})
    with pytest.raises(SchemaError, match="must be a boolean"):
        element_from_raw({"type": "toggle", "messageKey": "K", "label": "L", "defaultValue": "yes"})
    with pytest.raises(SchemaError, match="must be an object"):
        element_from_raw(["heading"])  # type: ignore[arg-type]
    with pytest.raises(SchemaError, match="Unknown form element type"):
        element_from_raw({"type": ["heading"]})
    with pytest.raises(SchemaError, match="Unknown form element type"):
        element_from_raw({"type": {"name": "toggle"}})


def test_toggle_from_raw_defaults_optional_fields() -> None:
    toggle = element_from_raw({"type": "toggle", "messageKey": "K", "label": "L"})
    assert toggle == Toggle(key="K", label="L", default_value=False, description="")


def test_schema_from_raw_validates_duplicates() -> None:
    raw = [
        {"type": "toggle", "messageKey": "K", "label": "one"},
        {"type": "toggle", "messageKey": "K", "label": "two"},
    ]
    with pytest.raises(SchemaError, match="Duplicate toggle key"):
        schema_from_raw(raw)
    with pytest.raises(SchemaError, match="must be a list"):
        schema_from_raw({"type": "heading"})


def test_load_schema_by_suffix(tmp_path: Path) -> None:
    json_path = tmp_path / "schema.json"
    json_path.write_text(json.dumps(HOST_CONFIG), encoding="utf-8")
    yaml_path = tmp_path / "schema.yml"
    yaml_path.write_text(yaml.safe_dump(HOST_CONFIG, sort_keys=False), encoding="utf-8")
    js_path = tmp_path / "config.js"
    js_path.write_text(f"module.exports = {json.dumps(HOST_CONFIG, indent=2)};\n", encoding="utf-8")

    for path in (json_path, yaml_path, js_path):
        assert load_schema(path) == get_schema()


def test_load_schema_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_schema(tmp_path / "missing.json")

    bad_suffix = tmp_path / "schema.txt"
    bad_suffix.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported schema format"):
        load_schema(bad_suffix)

    bad_js = tmp_path / "bad.js"
    bad_js.write_text("export default [];", encoding="utf-8")
    with pytest.raises(SchemaError, match="module.exports"):
        load_schema(bad_js)

    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("- type: heading\n  defaultValue: [unclosed\n", encoding="utf-8")
    with pytest.raises(SchemaError, match="Could not parse yaml schema"):
        load_schema(bad_yaml)

    bad_json = tmp_path / "bad.json"
    bad_json.write_text("[{\"type\": ", encoding="utf-8")
    with pytest.raises(SchemaError, match="Could not parse json schema"):
        load_schema(bad_json)


def test_small_schema_round_trip() -> None:
    schema = SettingsSchema((Heading("Only"),))
    assert schema_from_raw(schema_to_raw(schema)) == schema
