"""Infrastructure layer — operating-system integration.

This layer spawns child processes and opens the controlling terminal.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from xcute.infra.subprocess_executor import LAUNCH_FAILURE_STATUS, SubprocessExecutor
from xcute.infra.terminal import open_confirmation_stream

__all__: list[str] = [
    "LAUNCH_FAILURE_STATUS",
    "SubprocessExecutor",
    "open_confirmation_stream",
]
