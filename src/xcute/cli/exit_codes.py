"""Exit-code constants used by the CLI layer.

A failed run exits with the failing command's own status; the
constants below cover every other exit path.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — every executed command succeeded (or nothing ran)."""

GENERAL_ERROR: int = 1
"""A known XcuteError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

BROKEN_PIPE: int = 141
"""Standard output was closed by the reader (128 + SIGPIPE=13)."""
