"""Occurrence-marker substitution.

A single left-to-right pass: markers that appear inside the replacement
text are never substituted again.
"""

from __future__ import annotations

PLACEHOLDER: str = "{}"


def substitute(template: str, replacement: str) -> str:
    """Replace every non-overlapping ``{}`` in *template* with *replacement*."""
    return template.replace(PLACEHOLDER, replacement)

