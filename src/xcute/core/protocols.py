"""Protocols (interfaces) consumed by the core layer.

The line processor depends ONLY on these contracts.  The real
implementations live in ``infra`` (process spawning) and ``cli``
(rendering, prompting); tests substitute recording doubles.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from xcute.core.models import MessageKind


class CommandExecutor(Protocol):
    """Contract for running one resolved command to completion.

    Both operations block until the command terminates.  Implementations
    never raise for launch failures: a program that cannot be started
    reports status ``1``, exactly like a program that exited with ``1``.
    """

    def execute_direct(self, argv: Sequence[str]) -> int:
        """Run ``argv[0]`` with ``argv[1:]`` as verbatim arguments.

        An empty *argv* runs nothing and returns ``0``.
        """
        ...  # pragma: no cover

    def execute_shell(self, command: str) -> int:
        """Run *command* through the host's ``sh -c``."""
        ...  # pragma: no cover


class Reporter(Protocol):
    """Sink for categorized diagnostic messages (one line each)."""

    def emit(self, kind: MessageKind, text: str) -> None:
        ...  # pragma: no cover


class Confirmer(Protocol):
    """Asks whether a resolved command should run."""

    def confirm(self, command: str) -> bool:
        """Return ``True`` only for an affirmative answer."""
        ...  # pragma: no cover
