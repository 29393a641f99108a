"""Infrastructure: access to the controlling terminal.

Standard input carries the lines being processed, so interactive
answers are read from the terminal device instead.

Rules
-----
* No rendering; callers own the prompt.
* The device is opened only when interactive mode asks for it.
"""

from __future__ import annotations

import os
from typing import TextIO

from xcute.exceptions import TerminalUnavailableError


def terminal_device() -> str:
    """Return the path of the controlling terminal for this platform."""
    if os.name == "nt":
        return "CON"
    return "/dev/tty"


def open_confirmation_stream() -> TextIO:
    """Open the controlling terminal for reading confirmation answers.

    Raises
    ------
    TerminalUnavailableError
        When the process has no controlling terminal (cron, CI, ...).
    """
    device = terminal_device()
    try:
        return open(device, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise TerminalUnavailableError(
            f"cannot open {device} for interactive confirmation: {exc.strerror or exc}",
            hint="Run without -i, or from an interactive terminal.",
        ) from exc
