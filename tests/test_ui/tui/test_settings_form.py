from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static, Switch

from fiftyeight.schema import get_schema
from fiftyeight.ui.tui.widgets.form import (
    SettingsForm,
    build_widgets,
    key_from_field_id,
    toggle_field_id,
)


def _children(widget: Any) -> list[Any]:
    return list(getattr(widget, "_pending_children", []))


def test_toggle_field_ids_round_trip() -> None:
    assert toggle_field_id("DarkMode") == "settings-toggle-DarkMode"
    assert key_from_field_id("settings-toggle-DarkMode") == "DarkMode"
    assert key_from_field_id("settings-toggle-") is None
    assert key_from_field_id("other-DarkMode") is None


def test_build_widgets_follows_schema_order() -> None:
    schema = get_schema()
    widgets = build_widgets(schema, schema.defaults())

    assert [type(widget) for widget in widgets] == [Static, Static, Vertical, Button]
    assert widgets[0].has_class("settings-heading")
    assert widgets[1].has_class("settings-text")
    assert widgets[2].has_class("settings-section")
    assert widgets[3].has_class("settings-submit")
    assert str(widgets[3].label) == "Save Settings"

    section_children = _children(widgets[2])
    assert isinstance(section_children[0], Static)
    assert section_children[0].has_class("settings-heading")
    rows = section_children[1:]
    assert all(isinstance(row, Horizontal) for row in rows)

    switch_ids = [_children(row)[1].id for row in rows]
    assert switch_ids == [toggle_field_id(key) for key in schema.keys()]


def test_build_widgets_uses_current_values() -> None:
    schema = get_schema()
    values = dict(schema.defaults(), ShowAmPm=True)
    section = build_widgets(schema, values)[2]
    switches = {
        _children(row)[1].id: _children(row)[1]
        for row in _children(section)[1:]
    }
    assert all(isinstance(switch, Switch) for switch in switches.values())
    assert switches[toggle_field_id("ShowAmPm")].value is True
    assert switches[toggle_field_id("DarkMode")].value is False


def test_form_seeds_values_and_ignores_unknown_keys() -> None:
    form = SettingsForm(get_schema(), {"DarkMode": True, "Legacy": True})
    assert form.values == {
        "DarkMode": True,
        "ShowAmPm": False,
        "Use24HourFormat": False,
        "UseTwoLetterDay": False,
    }


def test_switch_changes_update_values() -> None:
    form = SettingsForm(get_schema())
    form.on_switch_changed(SimpleNamespace(switch=SimpleNamespace(id=toggle_field_id("UseTwoLetterDay")), value=True))
    form.on_switch_changed(SimpleNamespace(switch=SimpleNamespace(id="unrelated"), value=True))
    assert form.values["UseTwoLetterDay"] is True
    assert sum(form.values.values()) == 1


def test_submit_posts_full_mapping() -> None:
    form = SettingsForm(get_schema(), {"Use24HourFormat": True})
    posted: list[Any] = []
    form.post_message = posted.append  # type: ignore[method-assign]

    payload = form.submit()

    assert len(posted) == 1
    assert isinstance(posted[0], SettingsForm.Submitted)
    assert posted[0].payload == payload
    assert payload == {
        "DarkMode": False,
        "ShowAmPm": False,
        "Use24HourFormat": True,
        "UseTwoLetterDay": False,
    }


def test_submit_button_press_triggers_submit() -> None:
    form = SettingsForm(get_schema())
    posted: list[Any] = []
    form.post_message = posted.append  # type: ignore[method-assign]

    stopped: list[bool] = []
    submit_button = SimpleNamespace(has_class=lambda name: name == "settings-submit")
    form.on_button_pressed(SimpleNamespace(button=submit_button, stop=lambda: stopped.append(True)))
    other_button = SimpleNamespace(has_class=lambda name: False)
    form.on_button_pressed(SimpleNamespace(button=other_button, stop=lambda: stopped.append(True)))

    assert len(posted) == 1
    assert stopped == [True]


def test_load_values_replaces_known_keys() -> None:
    form = SettingsForm(get_schema(), {"DarkMode": True})
    form.load_values(get_schema().defaults())
    assert form.values == get_schema().defaults()
