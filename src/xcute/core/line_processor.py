"""Core line processor — drives one command per input line.

For every line the processor walks a fixed sequence:

1. read (end of input finalizes the run);
2. skip empty lines;
3. show the target line;
4. resolve the template, then preview, dry-run or confirm;
5. execute, report the status, apply the error policy;
6. finalize into a :class:`~xcute.core.models.RunOutcome`.

The error policy is deliberately asymmetric.  Without ``force_continue``
the *first* failing status halts the run and is reported.  With it, all
lines are processed and the *last* failing status is reported.

Guarantees
----------
* No process spawning, no terminal access: the executor, reporter and
  confirmer are injected.
* Strictly sequential; one line is fully handled before the next read.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from xcute.core.models import (
    CommandTemplate,
    ExecutionOptions,
    MessageKind,
    ResolvedCommand,
    RunOutcome,
)
from xcute.core.protocols import CommandExecutor, Confirmer, Reporter
from xcute.exceptions import InputReadError

LOGGER = logging.getLogger(__name__)

EMPTY_LINE_NOTICE: str = "[empty line]"


class LineProcessor:
    """Runs a :class:`CommandTemplate` against a stream of lines.

    Parameters
    ----------
    executor:
        Runs resolved commands and returns their status.
    reporter:
        Receives categorized diagnostic messages.
    output:
        Primary output stream; only dry-run previews are written here.
    confirmer:
        Required when ``interactive`` is enabled.
    sleep:
        Delay function used for the interval; injectable for tests.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        reporter: Reporter,
        output: TextIO,
        *,
        confirmer: Confirmer | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._executor = executor
        self._reporter = reporter
        self._output = output
        self._confirmer = confirmer
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        options: ExecutionOptions,
        template: CommandTemplate,
        lines: Iterable[str],
    ) -> RunOutcome:
        """Process *lines* until exhausted or halted by a failure.

        Raises
        ------
        InputReadError
            When reading the next line fails.  No outcome is produced.
        ValueError
            When the template and options disagree on shell mode, or when
            confirmation is needed but no confirmer was given.
        """
        if options.shell_mode != template.shell:
            raise ValueError("shell_mode does not match the template")
        if options.interactive and not options.dry_run and self._confirmer is None:
            raise ValueError("interactive mode requires a confirmer")

        outcome = RunOutcome()
        delay_pending = False

        for line in _read_lines(lines):
            if not line:
                if options.show_target or options.show_command:
                    self._reporter.emit(MessageKind.EMPTY_LINE, EMPTY_LINE_NOTICE)
                continue

            # Only a non-empty line pays the pending delay.
            if delay_pending:
                self._sleep(options.interval)
                delay_pending = False

            if options.show_target:
                self._reporter.emit(MessageKind.TARGET, line)

            resolved = template.resolve(line)
            if not self._should_execute(options, resolved):
                continue

            status = self._execute(resolved)
            outcome.record(status)

            if options.show_command:
                if status == 0:
                    self._reporter.emit(MessageKind.SUCCESS, f"[exit: {status}]")
                else:
                    self._reporter.emit(MessageKind.FAILURE, f"[exit: {status}]")

            if status != 0 and not options.force_continue:
                LOGGER.debug("halting after exit status %d", status)
                outcome.halted = True
                return outcome

            if options.interval > 0:
                delay_pending = True

        return outcome

    # ------------------------------------------------------------------
    # Per-line steps
    # ------------------------------------------------------------------

    def _should_execute(self, options: ExecutionOptions, resolved: ResolvedCommand) -> bool:
        """Preview, dry-run and confirm; return whether to execute."""
        display = resolved.display

        if options.show_command:
            self._reporter.emit(MessageKind.COMMAND, f"> {display}")

        if options.dry_run:
            self._output.write(f"{display}\n")
            return False

        if options.interactive and self._confirmer is not None:
            return self._confirmer.confirm(display)

        return True

    def _execute(self, resolved: ResolvedCommand) -> int:
        if resolved.command is not None:
            return self._executor.execute_shell(resolved.command)
        return self._executor.execute_direct(resolved.argv)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines without their terminator, mapping read failures."""
    iterator = iter(lines)
    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"error reading stdin: {exc}") from exc
        yield raw.rstrip("\r\n")
