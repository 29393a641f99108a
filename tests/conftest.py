"""Shared pytest fixtures and configuration for the xcute test suite.

Guidelines
----------
* Core tests never spawn processes — the executor is a recording double.
* Real-process tests are confined to the infra/CLI tests and are
  skipped where no POSIX ``sh`` is available.
* No test reads from the real terminal.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable, Sequence

import pytest

from xcute.core.models import MessageKind

requires_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX sh")


class RecordingExecutor:
    """CommandExecutor double: records calls, returns scripted statuses.

    Statuses are consumed in call order; once exhausted, ``default`` is
    returned.
    """

    def __init__(self, statuses: Iterable[int] = (), default: int = 0) -> None:
        self._statuses = list(statuses)
        self._default = default
        self.direct_calls: list[list[str]] = []
        self.shell_calls: list[str] = []
        self.events: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.direct_calls) + len(self.shell_calls)

    def _next_status(self) -> int:
        if self._statuses:
            return self._statuses.pop(0)
        return self._default

    def execute_direct(self, argv: Sequence[str]) -> int:
        self.direct_calls.append(list(argv))
        self.events.append("execute")
        return self._next_status()

    def execute_shell(self, command: str) -> int:
        self.shell_calls.append(command)
        self.events.append("execute")
        return self._next_status()


class RecordingReporter:
    """Reporter double keeping ``(kind, text)`` pairs in order."""

    def __init__(self) -> None:
        self.messages: list[tuple[MessageKind, str]] = []

    def emit(self, kind: MessageKind, text: str) -> None:
        self.messages.append((kind, text))

    def texts(self, kind: MessageKind) -> list[str]:
        return [text for k, text in self.messages if k == kind]


class ScriptedConfirmer:
    """Confirmer double answering from a fixed list of booleans."""

    def __init__(self, answers: Iterable[bool]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def confirm(self, command: str) -> bool:
        self.prompts.append(command)
        return self._answers.pop(0)


@pytest.fixture()
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()
