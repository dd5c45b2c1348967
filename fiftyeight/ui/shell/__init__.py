"""Single-shot command-line interface for fiftyeight."""

from __future__ import annotations

from fiftyeight.ui.shell.cli import run_schema, run_settings

__all__ = ["run_schema", "run_settings"]
