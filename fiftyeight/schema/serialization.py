"""
Conversion between form elements and the host's structured wire form.

The wire form is a list of plain dicts, one per element:

- heading / text / submit: ``{"type": ..., "defaultValue": <text>}``
- section: ``{"type": "section", "items": [...]}``
- toggle: ``{"type": "toggle", "messageKey": ..., "label": ...,
  "defaultValue": <bool>, "description": ...}``

The same list can be written as JSON, YAML, or a CommonJS module
(``module.exports = [...];``) for hosts that load ``config.js``.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List

import yaml

from fiftyeight.logging import get_logger

from .elements import (
    ELEMENT_TYPES,
    FormElement,
    Heading,
    Paragraph,
    SchemaError,
    Section,
    SettingsSchema,
    SubmitButton,
    Toggle,
)

logger = get_logger(__name__)

SCHEMA_FORMATS = ("json", "yaml", "js")

_JS_EXPORT_RE = re.compile(r"^\s*module\.exports\s*=\s*(?P<body>.*?)\s*;?\s*$", re.DOTALL)


def element_to_raw(element: FormElement) -> Dict[str, Any]:
    """
    Convert one form element to its wire dict.

    Args:
        element: Form element

    Returns:
        Dictionary in host wire form
    """
    if isinstance(element, (Heading, Paragraph)):
        return {"type": element.type, "defaultValue": element.text}
    if isinstance(element, SubmitButton):
        return {"type": element.type, "defaultValue": element.label}
    if isinstance(element, Section):
        return {"type": element.type, "items": [element_to_raw(child) for child in element.children]}
    if isinstance(element, Toggle):
        return {
            "type": element.type,
            "messageKey": element.key,
            "label": element.label,
            "defaultValue": element.default_value,
            "description": element.description,
        }
    raise SchemaError(f"Unsupported form element: {element!r}")


def schema_to_raw(schema: SettingsSchema) -> List[Dict[str, Any]]:
    """Convert a whole schema to its wire list."""
    return [element_to_raw(element) for element in schema]


def _require_str(raw: Dict[str, Any], name: str, element_type: str) -> str:
    if name not in raw:
        raise SchemaError(f"'{element_type}' element is missing '{name}'")
    value = raw[name]
    if not isinstance(value, str):
        raise SchemaError(
            f"'{element_type}' element field '{name}' must be a string, got {type(value).__name__}"
        )
    return value


def element_from_raw(raw: Dict[str, Any]) -> FormElement:
    """
    Build a form element from its wire dict.

    Raises:
        SchemaError: If the type is unknown or a required field is missing
            or has the wrong type.
    """
    if not isinstance(raw, dict):
        raise SchemaError(f"Form element must be an object, got {type(raw).__name__}")

    element_type = raw.get("type")
    if not isinstance(element_type, str) or element_type not in ELEMENT_TYPES:
        raise SchemaError(f"Unknown form element type: {element_type!r}")

    if element_type == Heading.type:
        return Heading(_require_str(raw, "defaultValue", element_type))
    if element_type == Paragraph.type:
        return Paragraph(_require_str(raw, "defaultValue", element_type))
    if element_type == SubmitButton.type:
        return SubmitButton(_require_str(raw, "defaultValue", element_type))
    if element_type == Section.type:
        items = raw.get("items")
        if not isinstance(items, list):
            raise SchemaError("'section' element must have an 'items' list")
        return Section(tuple(element_from_raw(item) for item in items))

    default_value = raw.get("defaultValue", False)
    if not isinstance(default_value, bool):
        raise SchemaError(
            f"'toggle' element field 'defaultValue' must be a boolean, got {type(default_value).__name__}"
        )
    description = raw.get("description", "")
    if not isinstance(description, str):
        raise SchemaError("'toggle' element field 'description' must be a string")
    return Toggle(
        key=_require_str(raw, "messageKey", element_type),
        label=_require_str(raw, "label", element_type),
        default_value=default_value,
        description=description,
    )


def schema_from_raw(raw: Any) -> SettingsSchema:
    """Build and validate a schema from its wire list."""
    if not isinstance(raw, list):
        raise SchemaError(f"Schema must be a list of elements, got {type(raw).__name__}")
    return SettingsSchema(tuple(element_from_raw(item) for item in raw))


def dump_schema(schema: SettingsSchema, fmt: str = "json") -> str:
    """
    Render a schema as text.

    Args:
        schema: Schema to render
        fmt: One of ``json``, ``yaml`` or ``js``

    Returns:
        Rendered document, newline-terminated
    """
    raw = schema_to_raw(schema)
    fmt = fmt.lower()
    if fmt == "json":
        return json.dumps(raw, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(raw, sort_keys=False, allow_unicode=True)
    if fmt == "js":
        return f"module.exports = {json.dumps(raw, indent=2)};\n"
    raise ValueError(f"Unsupported schema format: {fmt}. Use one of {', '.join(SCHEMA_FORMATS)}")


def parse_schema_text(content: str, fmt: str) -> SettingsSchema:
    """
    Parse schema text in the given format.

    Raises:
        ValueError: If the format is unsupported
        SchemaError: If the text does not parse or is not a valid schema
    """
    fmt = fmt.lower()
    if fmt not in SCHEMA_FORMATS:
        raise ValueError(f"Unsupported schema format: {fmt}. Use one of {', '.join(SCHEMA_FORMATS)}")

    try:
        if fmt == "json":
            raw = json.loads(content)
        elif fmt == "yaml":
            raw = yaml.safe_load(content) or []
        else:
            match = _JS_EXPORT_RE.match(content)
            if match is None:
                raise SchemaError("JavaScript schema must be a single 'module.exports = [...]' statement")
            raw = json.loads(match.group("body"))
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaError(f"Could not parse {fmt} schema: {exc}") from exc
    return schema_from_raw(raw)


def load_schema(path: Path | str) -> SettingsSchema:
    """
    Load a schema from a ``.json``, ``.yaml``/``.yml`` or ``.js`` file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is unsupported
        SchemaError: If the document is not a valid schema
    """
    path = Path(path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        fmt = "yaml"
    elif suffix in {".json", ".js"}:
        fmt = suffix[1:]
    else:
        raise ValueError(f"Unsupported schema format: {suffix}. Use .json, .yaml, .yml or .js")

    logger.debug("Loading schema from %s", path)
    return parse_schema_text(path.read_text(encoding="utf-8"), fmt)
