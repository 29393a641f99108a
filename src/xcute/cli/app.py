"""CLI application entry point for xcute.

This module is the **sole error boundary** for the entire application.
It catches :class:`~xcute.exceptions.XcuteError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No per-line logic lives here; the run is delegated to
  :class:`~xcute.core.line_processor.LineProcessor`.
* This module is the only place that translates a run outcome into the
  OS process exit code: a failed run exits with the failing command's
  own status.
"""

from __future__ import annotations

import argparse
import math
import os
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from xcute.cli import exit_codes
from xcute.cli.color import COLOR_MODES, should_use_color
from xcute.cli.console import configure_logging, console, get_rich_console
from xcute.core.models import CommandTemplate, ExecutionOptions, MessageKind, RunOutcome
from xcute.exceptions import UsageError, XcuteError
from xcute.version import __version__

_EPILOG = """\
examples:
  ls *.txt | xcute cp {} backup/{}
  cat hosts | xcute -l -f -t 0.5 ssh {} uptime
  git ls-files | xcute -c 'wc -l {} | sort -n'
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    if not math.isfinite(seconds) or seconds < 0:
        raise argparse.ArgumentTypeError(f"interval must be >= 0, got '{value}'")
    return seconds


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Option parsing stops at the first word of the command template, so
    the template may carry its own dash options.
    """
    parser = argparse.ArgumentParser(
        prog="xcute",
        description=(
            "Run a command once for every line of standard input, "
            "replacing {} with the line."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n", "--dry-run", action="store_true",
        help="print the commands on stdout instead of running them",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="ask for confirmation (read from the terminal) before each command",
    )
    parser.add_argument(
        "-w", "--show-target", action="store_true",
        help="echo each input line to stderr",
    )
    parser.add_argument(
        "-l", "--show-command", action="store_true",
        help="echo each command and its exit status to stderr",
    )
    parser.add_argument(
        "-f", "--force", dest="force_continue", action="store_true",
        help="keep going after a command fails",
    )
    parser.add_argument(
        "-t", "--interval", type=_non_negative_float, default=0.0, metavar="SECONDS",
        help="wait between commands (fractions allowed)",
    )
    parser.add_argument(
        "-c", "--shell", dest="shell_mode", action="store_true",
        help="run the single command string through sh -c",
    )
    parser.add_argument(
        "--color", choices=COLOR_MODES, default="auto",
        help="colorize diagnostics (default: auto; NO_COLOR disables)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug information to stderr",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="command template; every {} is replaced by the input line",
    )
    return parser


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _template_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[str]:
    """Return the template words, rejecting invalid combinations."""
    words: list[str] = list(args.command)
    if words and words[0] == "--":
        words = words[1:]

    if not words:
        raise UsageError(
            "a command template is required",
            hint=parser.format_usage().strip(),
        )
    if args.shell_mode and len(words) != 1:
        raise UsageError(
            "shell mode (-c) requires exactly one argument",
            hint="Usage: xcute -c 'shell_command'",
        )
    return words


def _options_from_args(args: argparse.Namespace) -> ExecutionOptions:
    return ExecutionOptions(
        dry_run=args.dry_run,
        interactive=args.interactive,
        show_target=args.show_target,
        show_command=args.show_command,
        force_continue=args.force_continue,
        interval=args.interval,
        shell_mode=args.shell_mode,
    )


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------

def _prepare_stream(stream: TextIO, **settings: str) -> TextIO:
    """Keep undecodable bytes intact on a standard stream.

    ``surrogateescape`` lets file names that are not valid in the locale
    encoding travel unchanged from stdin to the child's argv and to the
    dry-run output.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape", **settings)
    return stream


# ---------------------------------------------------------------------------
# Run dispatch
# ---------------------------------------------------------------------------

def _report_failure(reporter: Any, outcome: RunOutcome) -> None:
    if outcome.halted:
        message = f"Error: command failed with exit code {outcome.exit_code}"
    else:
        message = f"Error: commands completed with errors, last exit code: {outcome.exit_code}"
    reporter.emit(MessageKind.ERROR, message)


def _handle_run(
    options: ExecutionOptions,
    template: CommandTemplate,
    *,
    color_mode: str,
    verbose: bool,
) -> int:
    """Wire the real collaborators and process standard input.

    Flow:
    1. Build the stderr console and logging.
    2. Open the terminal for confirmations when interactive.
    3. Run the line processor over stdin.
    4. Map the outcome to an exit code.
    """
    from xcute.cli.reporter import ConsoleReporter, TerminalConfirmer
    from xcute.core.line_processor import LineProcessor
    from xcute.infra.subprocess_executor import SubprocessExecutor
    from xcute.infra.terminal import open_confirmation_stream

    rich_console = get_rich_console(color=should_use_color(color_mode, sys.stderr))
    configure_logging(verbose, rich_console)
    reporter = ConsoleReporter(rich_console)

    confirmation_stream: TextIO | None = None
    confirmer: TerminalConfirmer | None = None
    if options.interactive and not options.dry_run:
        confirmation_stream = open_confirmation_stream()
        confirmer = TerminalConfirmer(rich_console, confirmation_stream)

    processor = LineProcessor(
        SubprocessExecutor(),
        reporter,
        _prepare_stream(sys.stdout),
        confirmer=confirmer,
    )
    try:
        # Only LF ends a line; a preceding CR is stripped by the processor.
        outcome = processor.run(options, template, _prepare_stream(sys.stdin, newline="\n"))
    finally:
        if confirmation_stream is not None:
            confirmation_stream.close()
        sys.stdout.flush()

    if outcome.succeeded:
        return exit_codes.SUCCESS
    _report_failure(reporter, outcome)
    return outcome.exit_code


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the xcute CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        When no template is given or shell mode has more than one word.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    words = _template_args(parser, args)
    options = _options_from_args(args)
    template = CommandTemplate.from_args(words, shell=options.shell_mode)

    return _handle_run(
        options,
        template,
        color_mode=args.color,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at the null device so the final flush at exit stays quiet."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except XcuteError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(exc.hint, style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except BrokenPipeError:
        # The reader went away (`xcute -n ... | head -1`).
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
