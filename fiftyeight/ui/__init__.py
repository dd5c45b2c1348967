"""fiftyeight UI module.

- shell: single-shot CLI commands
- tui: Textual-based settings form
"""

from __future__ import annotations

__all__ = ["shell", "tui"]
