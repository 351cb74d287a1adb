"""Exit-code constants used by the CLI layer.

Every exit path of :func:`twoptr.cli.app.cli` maps to one of these.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed; results (if any) were printed."""

GENERAL_ERROR: int = 1
"""A TwoptrError was caught, or a doctor check failed."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the TwoptrError hierarchy reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
