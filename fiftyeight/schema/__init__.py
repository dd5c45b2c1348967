"""
Settings form schema for fiftyeight.

This package provides the form element models, the watchface schema and
its wire-form serialization.
"""

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
    iter_elements,
    validate_elements,
)
from .serialization import (
    SCHEMA_FORMATS,
    dump_schema,
    element_from_raw,
    element_to_raw,
    load_schema,
    parse_schema_text,
    schema_from_raw,
    schema_to_raw,
)
from .watchface import (
    DARK_MODE,
    SHOW_AM_PM,
    USE_24_HOUR_FORMAT,
    USE_TWO_LETTER_DAY,
    WATCHFACE_SCHEMA,
    get_schema,
)

__all__ = [
    "ELEMENT_TYPES",
    "FormElement",
    "Heading",
    "Paragraph",
    "SchemaError",
    "Section",
    "SettingsSchema",
    "SubmitButton",
    "Toggle",
    "iter_elements",
    "validate_elements",
    "SCHEMA_FORMATS",
    "dump_schema",
    "element_from_raw",
    "element_to_raw",
    "load_schema",
    "parse_schema_text",
    "schema_from_raw",
    "schema_to_raw",
    "DARK_MODE",
    "SHOW_AM_PM",
    "USE_24_HOUR_FORMAT",
    "USE_TWO_LETTER_DAY",
    "WATCHFACE_SCHEMA",
    "get_schema",
]
