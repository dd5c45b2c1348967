"""Textual widgets for the fiftyeight TUI."""

from fiftyeight.ui.tui.widgets.form import (
    SettingsForm,
    build_widgets,
    key_from_field_id,
    toggle_field_id,
)

__all__ = [
    "SettingsForm",
    "build_widgets",
    "key_from_field_id",
    "toggle_field_id",
]
