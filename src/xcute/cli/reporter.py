"""Rich renderers for the core's diagnostic and confirmation protocols."""

from __future__ import annotations

from typing import Any, TextIO

from xcute.core.models import MessageKind

STYLES: dict[MessageKind, str] = {
    MessageKind.TARGET: "cyan",
    MessageKind.COMMAND: "blue",
    MessageKind.EMPTY_LINE: "yellow",
    MessageKind.SUCCESS: "green",
    MessageKind.FAILURE: "red",
    MessageKind.ERROR: "red",
}

AFFIRMATIVE_ANSWERS: frozenset[str] = frozenset({"y", "Y"})


class ConsoleReporter:
    """Concrete :class:`~xcute.core.protocols.Reporter` over a Rich console."""

    def __init__(self, rich_console: Any) -> None:
        self._console = rich_console

    def emit(self, kind: MessageKind, text: str) -> None:
        self._console.print(text, style=STYLES[kind])


class TerminalConfirmer:
    """Concrete :class:`~xcute.core.protocols.Confirmer`.

    The prompt is rendered on the diagnostic console; the answer is one
    line read from *stream* (normally the controlling terminal).  End of
    input counts as a refusal.
    """

    def __init__(self, rich_console: Any, stream: TextIO) -> None:
        self._console = rich_console
        self._stream = stream

    def confirm(self, command: str) -> bool:
        answer: str = self._console.input(
            f"Execute: {command} [y/N] ",
            markup=False,
            emoji=False,
            stream=self._stream,
        )
        return answer.strip() in AFFIRMATIVE_ANSWERS
