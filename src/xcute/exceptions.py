"""Custom exception hierarchy for xcute.

Every condition that aborts a run before or during processing maps to a
subclass of :class:`XcuteError`, so that the CLI error boundary can
render a clean message and choose the exit code.  A command that fails
to launch or exits non-zero is *not* an exception: it is a status code
handled by the line processor's error policy.

Hierarchy
---------
XcuteError
├── UsageError
├── InputReadError
├── EnvironmentError
└── TerminalUnavailableError
"""

from __future__ import annotations


class XcuteError(Exception):
    """Base exception for all xcute errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(XcuteError):
    """Raised when the command line is incomplete or inconsistent."""


# --- Input -----------------------------------------------------------------

class InputReadError(XcuteError):
    """Raised when standard input cannot be read mid-stream."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(XcuteError):
    """Raised when a required runtime dependency is not available."""


class TerminalUnavailableError(XcuteError):
    """Raised when interactive mode has no terminal to read answers from."""
