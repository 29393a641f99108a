"""Domain models for xcute.

Options, templates and resolved commands are **frozen** dataclasses:
they are read-only for the duration of a run.  :class:`RunOutcome` is
the single mutable accumulator, owned by the line processor.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from xcute.core.placeholders import substitute


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionOptions:
    """Behaviour switches read once per run."""

    dry_run: bool = False
    """Print resolved commands on the primary output instead of running them."""

    interactive: bool = False
    """Ask for confirmation before every execution."""

    show_target: bool = False
    """Echo each raw input line to the diagnostic stream."""

    show_command: bool = False
    """Echo each resolved command and its exit status."""

    force_continue: bool = False
    """Keep processing after a command fails."""

    interval: float = 0.0
    """Seconds to wait between executions."""

    shell_mode: bool = False
    """Run the template through ``sh -c`` instead of directly."""


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedCommand:
    """A template with every marker replaced by one input line.

    Exactly one of :attr:`argv` (direct mode) and :attr:`command`
    (shell mode) is meaningful.
    """

    argv: tuple[str, ...] = ()
    command: str | None = None

    @property
    def display(self) -> str:
        """Render the command the way previews show it."""
        if self.command is not None:
            return self.command
        return " ".join(self.argv)


@dataclass(frozen=True, slots=True)
class CommandTemplate:
    """The user's command, containing zero or more ``{}`` markers.

    In shell mode :attr:`elements` holds exactly one string, the command
    line handed to the interpreter.
    """

    elements: tuple[str, ...]
    shell: bool = False

    @classmethod
    def from_args(cls, args: Sequence[str], *, shell: bool = False) -> CommandTemplate:
        return cls(elements=tuple(args), shell=shell)

    def resolve(self, line: str) -> ResolvedCommand:
        """Substitute *line* into every element."""
        if self.shell:
            return ResolvedCommand(command=substitute(self.elements[0], line))
        return ResolvedCommand(
            argv=tuple(substitute(element, line) for element in self.elements),
        )


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

class MessageKind(enum.Enum):
    """Category of a diagnostic message; renderers style by kind."""

    TARGET = "target"
    COMMAND = "command"
    EMPTY_LINE = "empty_line"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class RunOutcome:
    """Aggregate result of one run over the input stream."""

    last_error_code: int = 0
    """Most recent non-zero status, or ``0`` when nothing failed."""

    halted: bool = False
    """``True`` when the stop-on-error policy ended the run early."""

    executed: int = 0
    """Number of commands dispatched to the executor."""

    @property
    def succeeded(self) -> bool:
        return self.last_error_code == 0

    @property
    def exit_code(self) -> int:
        return self.last_error_code

    def record(self, status: int) -> None:
        """Account for one executed command's status."""
        self.executed += 1
        if status != 0:
            self.last_error_code = status
