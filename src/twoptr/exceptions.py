"""Custom exception hierarchy for twoptr.

Every error the package raises on purpose inherits from
:class:`TwoptrError`, so the CLI error boundary can render a clean
message (plus an optional hint) instead of a stack trace.

The core algorithms are permissive by default and raise nothing for
degenerate input; these errors surface only from opt-in strict checks
and from the CLI layer.

Hierarchy
---------
TwoptrError
├── InvalidPositionError
├── UnknownAlgorithmError
├── DemoSelectionError
└── EnvironmentError
"""

from __future__ import annotations


class TwoptrError(Exception):
    """Base exception for all twoptr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Linked list -----------------------------------------------------------

class InvalidPositionError(TwoptrError):
    """Raised in strict mode when a from-the-end position is out of range."""


# --- Sample runs / demo ----------------------------------------------------

class UnknownAlgorithmError(TwoptrError):
    """Raised when a sample run is requested for an unknown algorithm."""


class DemoSelectionError(TwoptrError):
    """Raised when the interactive algorithm picker is cancelled."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TwoptrError):
    """Raised when an optional UI dependency (rich, questionary) is missing."""
