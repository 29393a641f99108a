"""Subprocess-backed implementation of :class:`~xcute.core.protocols.CommandExecutor`.

This module is the **only** place in the codebase that spawns
processes.  Launch failures are never raised: they are reported as
status :data:`LAUNCH_FAILURE_STATUS`, so the line processor applies the
same error policy as for a command that exited non-zero.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import IO

LOGGER = logging.getLogger(__name__)

LAUNCH_FAILURE_STATUS: int = 1
"""Status reported when the program cannot be found or started."""

SHELL: str = "sh"


class SubprocessExecutor:
    """Concrete :class:`CommandExecutor` built on :func:`subprocess.run`.

    The children's standard output and error are inherited from this
    process unless explicit streams are given.  Standard input is always
    the null device: the parent's stdin carries the lines still waiting
    to be processed.
    """

    def __init__(
        self,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def execute_direct(self, argv: Sequence[str]) -> int:
        if not argv:
            return 0
        return self._run(list(argv))

    def execute_shell(self, command: str) -> int:
        return self._run([SHELL, "-c", command])

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, args: list[str]) -> int:
        LOGGER.debug("spawning %r", args)
        try:
            process = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                stdout=self._stdout,
                stderr=self._stderr,
                check=False,
            )
        except OSError as exc:
            LOGGER.debug("failed to launch %r: %s", args[0], exc)
            return LAUNCH_FAILURE_STATUS
        return normalize_returncode(process.returncode)


def normalize_returncode(returncode: int) -> int:
    """Map a ``subprocess`` return code to a shell-style exit status.

    A child killed by signal *N* is reported by :mod:`subprocess` as
    ``-N``; shells report it as ``128 + N``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
