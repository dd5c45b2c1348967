"""
Typed view of the persisted watchface settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from fiftyeight.schema.watchface import (
    DARK_MODE,
    SHOW_AM_PM,
    USE_24_HOUR_FORMAT,
    USE_TWO_LETTER_DAY,
)


@dataclass
class WatchfaceSettings:
    """
    Settings consumed by the watchface.

    Each attribute mirrors one toggle. ``KEY_MAP`` maps attribute names to
    the persistence keys used in the submitted mapping.
    """

    dark_mode: bool = False
    """White text on a black background."""

    show_am_pm: bool = False
    """Show the AM/PM indicator in the top left corner."""

    use_24_hour_format: bool = False
    """24-hour clock instead of 12-hour."""

    use_two_letter_day: bool = False
    """Two-letter day abbreviations (SU, MO, ...) instead of three."""

    KEY_MAP: ClassVar[dict[str, str]] = {
        "dark_mode": DARK_MODE,
        "show_am_pm": SHOW_AM_PM,
        "use_24_hour_format": USE_24_HOUR_FORMAT,
        "use_two_letter_day": USE_TWO_LETTER_DAY,
    }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "WatchfaceSettings":
        """
        Build from a persisted key/value mapping.

        Missing keys and non-boolean values keep the field default.
        """
        values = {
            attr: mapping[key]
            for attr, key in cls.KEY_MAP.items()
            if isinstance(mapping.get(key), bool)
        }
        return cls(**values)

    def to_mapping(self) -> dict[str, bool]:
        """Return the persisted key/value mapping."""
        return {key: bool(getattr(self, attr)) for attr, key in self.KEY_MAP.items()}
