"""Custom exception hierarchy for starter-drills.

Every user-visible error condition maps to a subclass of
:class:`DrillError` so that the CLI error boundary can render a clean
message without leaking stack traces.

Hierarchy
---------
DrillError
├── InvalidMeasurementError
├── InvalidShapeSpecError
├── InvalidSizeInputError
│   ├── InvalidSizeFormatError
│   ├── InvalidSizeValueError
│   ├── NegativeSizeError
│   └── UnknownUnitError
└── MissingDependencyError
"""

from __future__ import annotations


class DrillError(Exception):
    """Base exception for all starter-drills errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Shapes ----------------------------------------------------------------

class InvalidMeasurementError(DrillError):
    """Raised when a shape's linear measurement is not strictly positive.

    The message is the bare reason string (e.g. ``"Invalid radius size"``)
    so callers can embed it in their own output.
    """

    @property
    def reason(self) -> str:
        return str(self)


class InvalidShapeSpecError(DrillError):
    """Raised when a ``--shape`` token cannot be parsed."""


# --- File sizes ------------------------------------------------------------

class InvalidSizeInputError(DrillError):
    """Base class for every ``"<number> <unit>"`` parsing failure."""


class InvalidSizeFormatError(InvalidSizeInputError):
    """Raised when the input is not exactly two whitespace-separated tokens."""


class InvalidSizeValueError(InvalidSizeInputError):
    """Raised when the numeric token is not a finite number."""


class NegativeSizeError(InvalidSizeInputError):
    """Raised when the numeric token is below zero."""


class UnknownUnitError(InvalidSizeInputError):
    """Raised when the unit token is not one of the supported units."""


# --- Environment -----------------------------------------------------------

class MissingDependencyError(DrillError):
    """Raised when an optional runtime dependency is not available."""


def append_usage_hint(hint: str | None, usage: str) -> str:
    """Append a usage line to an existing hint text.

    The usage line is appended only once and the original hint is kept
    verbatim.
    """
    marker = f"Usage: {usage}"
    if not hint:
        return marker
    if marker in hint:
        return hint
    return "\n".join((hint, marker))
