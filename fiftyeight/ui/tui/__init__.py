"""
TUI (Text User Interface) module for fiftyeight.

Renders the settings schema as an interactive form built with Textual.
"""

from __future__ import annotations

__all__ = [
    "SettingsApp",
    "run_tui",
]


def __getattr__(name: str):
    if name in __all__:
        from fiftyeight.ui.tui.app import SettingsApp, run_tui
        return {"SettingsApp": SettingsApp, "run_tui": run_tui}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
