"""
Settings form widget for the fiftyeight TUI.

Renders a settings schema as Textual widgets and emits the full
key/value mapping when the submit control is pressed.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static, Switch

from fiftyeight.logging import get_logger
from fiftyeight.schema import (
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

TOGGLE_ID_PREFIX = "settings-toggle-"


def toggle_field_id(key: str) -> str:
    """Return the Switch widget id bound to a toggle key."""
    return f"{TOGGLE_ID_PREFIX}{key}"


def key_from_field_id(field_id: str) -> Optional[str]:
    """Return the toggle key for a Switch widget id, or None."""
    if not field_id.startswith(TOGGLE_ID_PREFIX):
        return None
    return field_id[len(TOGGLE_ID_PREFIX):] or None


def _toggle_field(toggle: Toggle, value: bool) -> Widget:
    """Create a labeled Switch row with the toggle description below the label."""
    text = Vertical(
        Static(toggle.label, classes="settings-label", markup=False),
        Static(toggle.description, classes="settings-description", markup=False),
        classes="settings-label-block",
    )
    return Horizontal(
        text,
        Switch(value=bool(value), id=toggle_field_id(toggle.key)),
        classes="settings-field",
    )


def _set_switch(owner: Widget, field_id: str, value: bool) -> None:
    """Set a Switch widget value if the widget exists."""
    try:
        owner.query_one(f"#{field_id}", Switch).value = bool(value)
    except Exception:
        return


def build_widgets(elements: Iterable[FormElement], values: Mapping[str, bool]) -> list[Widget]:
    """
    Map form elements to Textual widgets in display order.

    Args:
        elements: Form elements (a schema or a section's children)
        values: Current key/value mapping used to set each Switch

    Returns:
        Widgets ready to mount
    """
    widgets: list[Widget] = []
    for element in elements:
        if isinstance(element, Heading):
            widgets.append(Static(element.text, classes="settings-heading", markup=False))
        elif isinstance(element, Paragraph):
            widgets.append(Static(element.text, classes="settings-text", markup=False))
        elif isinstance(element, Section):
            widgets.append(Vertical(*build_widgets(element.children, values), classes="settings-section"))
        elif isinstance(element, Toggle):
            widgets.append(_toggle_field(element, values.get(element.key, element.default_value)))
        elif isinstance(element, SubmitButton):
            widgets.append(Button(element.label, variant="primary", classes="settings-submit"))
        else:
            raise SchemaError(f"Unsupported form element: {element!r}")
    return widgets


class SettingsForm(Widget):
    """Interactive form bound to a settings schema."""

    DEFAULT_CSS = """
    SettingsForm {
        height: 1fr;
    }
    SettingsForm .settings-heading {
        text-style: bold;
        margin: 1 0 0 0;
    }
    SettingsForm .settings-text {
        text-style: dim;
        margin-bottom: 1;
    }
    SettingsForm .settings-section {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-bottom: 1;
    }
    SettingsForm .settings-field {
        height: auto;
        margin: 1 0 0 0;
    }
    SettingsForm .settings-label-block {
        width: 1fr;
        height: auto;
    }
    SettingsForm .settings-description {
        text-style: dim;
    }
    """

    class Submitted(Message):
        """Posted when the submit control is pressed."""

        def __init__(self, payload: dict[str, bool]) -> None:
            super().__init__()
            self.payload = payload

    def __init__(
        self,
        schema: SettingsSchema,
        values: Optional[Mapping[str, bool]] = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.schema = schema
        self._values: dict[str, bool] = schema.defaults()
        if values:
            self._values.update({key: bool(value) for key, value in values.items() if key in self._values})

    def compose(self) -> ComposeResult:
        yield VerticalScroll(*build_widgets(self.schema, self._values), id="settings-form-body")

    @property
    def values(self) -> dict[str, bool]:
        """Copy of the current key/value mapping."""
        return dict(self._values)

    def on_switch_changed(self, event: Switch.Changed) -> None:
        key = key_from_field_id(event.switch.id or "")
        if key is None or key not in self._values:
            return
        self._values[key] = bool(event.value)
        logger.debug("Toggle %s changed to %s", key, self._values[key])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not event.button.has_class("settings-submit"):
            return
        event.stop()
        self.submit()

    def submit(self) -> dict[str, bool]:
        """Post the current mapping as a ``Submitted`` message and return it."""
        payload = self.values
        self.post_message(self.Submitted(payload))
        return payload

    def load_values(self, values: Mapping[str, bool]) -> None:
        """Replace form values and update any mounted switches."""
        for key in self._values:
            if key in values:
                self._values[key] = bool(values[key])
                _set_switch(self, toggle_field_id(key), self._values[key])
