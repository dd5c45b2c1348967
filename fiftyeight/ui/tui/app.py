"""
TUI host for the fiftyeight settings form.

Renders the settings schema with Textual, persists the submitted mapping
through a SettingsStore, and reports the outcome in a status line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from fiftyeight.logging import exception_exc_info, format_exception_summary, get_logger
from fiftyeight.settings import SettingsError, SettingsStore
from fiftyeight.ui.tui.widgets.form import SettingsForm

if TYPE_CHECKING:
    from fiftyeight.config import AppConfig

logger = get_logger(__name__)


class SettingsApp(App):
    """Settings form application."""

    TITLE = "fiftyeight"
    SUB_TITLE = "Watchface Settings"

    CSS = """
    #settings-status {
        height: 1;
        padding: 0 1;
    }
    #settings-status.error {
        color: $error;
    }
    """

    _UI_ERROR_SUMMARY_MAX_LENGTH = 180

    BINDINGS = [
        Binding("ctrl+s", "submit", "Save", show=True),
        Binding("ctrl+r", "restore_defaults", "Defaults", show=True),
        Binding("ctrl+c", "quit", "Quit", show=False),
        Binding("ctrl+d", "quit", "Quit", show=False),
    ]

    def __init__(self, store: SettingsStore, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.store = store
        self.last_status: Optional[tuple[str, bool]] = None

    def compose(self) -> ComposeResult:
        yield Header(icon="")
        yield SettingsForm(self.store.schema, self.store.current, id="settings-form")
        yield Static("", id="settings-status")
        yield Footer()

    def on_mount(self) -> None:
        logger.info("Settings form mounted (settings file: %s)", self.store.path)

    def on_settings_form_submitted(self, event: SettingsForm.Submitted) -> None:
        try:
            self.store.submit(event.payload)
        except SettingsError as exc:
            logger.error("Settings submit rejected", exc_info=exception_exc_info(exc))
            self._set_status(
                format_exception_summary(exc, max_length=self._UI_ERROR_SUMMARY_MAX_LENGTH),
                True,
            )
            return
        except OSError as exc:
            logger.error("Could not write settings file", exc_info=exception_exc_info(exc))
            self._set_status(
                f"Save failed: {format_exception_summary(exc, max_length=self._UI_ERROR_SUMMARY_MAX_LENGTH)}",
                True,
            )
            return
        self._set_status("Settings saved.", False)

    def action_submit(self) -> None:
        self.query_one("#settings-form", SettingsForm).submit()

    def action_restore_defaults(self) -> None:
        self.query_one("#settings-form", SettingsForm).load_values(self.store.schema.defaults())
        self._set_status("Defaults restored. Save to persist.", False)

    def _set_status(self, message: str, error: bool) -> None:
        self.last_status = (message, error)
        try:
            status = self.query_one("#settings-status", Static)
        except Exception:
            return
        status.update(message)
        status.set_class(error, "error")


def run_tui(config: "AppConfig") -> int:
    """
    Run the settings form.

    Args:
        config: Application configuration

    Returns:
        Exit code (0 for success)
    """
    store = SettingsStore(config.settings_file)
    app = SettingsApp(store)
    app.run()
    return 0
