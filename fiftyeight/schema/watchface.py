"""
Settings schema for the fiftyeight watchface.
"""

from __future__ import annotations

from .elements import Heading, Paragraph, Section, SettingsSchema, SubmitButton, Toggle

DARK_MODE = "DarkMode"
SHOW_AM_PM = "ShowAmPm"
USE_24_HOUR_FORMAT = "Use24HourFormat"
USE_TWO_LETTER_DAY = "UseTwoLetterDay"

WATCHFACE_SCHEMA = SettingsSchema(
    (
        Heading("fiftyeight Configuration"),
        Paragraph("Customize your watchface appearance and behavior."),
        Section(
            (
                Heading("Display Settings"),
                Toggle(
                    key=DARK_MODE,
                    label="Dark Mode",
                    default_value=False,
                    description="Enable dark mode (white text on black background)",
                ),
                Toggle(
                    key=SHOW_AM_PM,
                    label="Show AM/PM Indicator",
                    default_value=False,
                    description="Display AM/PM indicator in top left corner",
                ),
                Toggle(
                    key=USE_24_HOUR_FORMAT,
                    label="24-Hour Time Format",
                    default_value=False,
                    description="Use 24-hour format instead of 12-hour format",
                ),
                Toggle(
                    key=USE_TWO_LETTER_DAY,
                    label="Two-Letter Day Abbreviations",
                    default_value=False,
                    description="Use 2-letter day abbreviations (SU, MO, etc.) instead of 3-letter",
                ),
            )
        ),
        SubmitButton("Save Settings"),
    )
)


def get_schema() -> SettingsSchema:
    return WATCHFACE_SCHEMA
