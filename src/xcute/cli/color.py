"""Color-mode resolution for diagnostic output.

``NO_COLOR`` (any non-empty value, see https://no-color.org) wins over
every ``--color`` mode.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from xcute.exceptions import UsageError

COLOR_MODES: tuple[str, ...] = ("never", "always", "auto")


def should_use_color(
    mode: str,
    stream: Any,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether diagnostics written to *stream* are colorized."""
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR", ""):
        return False

    if mode == "never":
        return False
    if mode == "always":
        return True
    if mode == "auto":
        isatty = getattr(stream, "isatty", None)
        return bool(isatty is not None and isatty())

    raise UsageError(
        f"invalid color option '{mode}', must be never/always/auto",
    )
