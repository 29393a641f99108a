"""Core layer — the per-line execution pipeline.

Rules
-----
* No process spawning and no terminal access.
* No imports from ``cli`` or ``infra``.
* Collaborators are injected through :mod:`xcute.core.protocols`.
"""

from xcute.core.line_processor import LineProcessor
from xcute.core.models import (
    CommandTemplate,
    ExecutionOptions,
    MessageKind,
    ResolvedCommand,
    RunOutcome,
)
from xcute.core.placeholders import PLACEHOLDER, substitute
from xcute.core.protocols import CommandExecutor, Confirmer, Reporter

__all__: list[str] = [
    "PLACEHOLDER",
    "CommandExecutor",
    "CommandTemplate",
    "Confirmer",
    "ExecutionOptions",
    "LineProcessor",
    "MessageKind",
    "Reporter",
    "ResolvedCommand",
    "RunOutcome",
    "substitute",
]
