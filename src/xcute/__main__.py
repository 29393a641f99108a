"""Allow ``python -m xcute`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m xcute`` behaves identically to the ``xcute`` console script.
"""

from __future__ import annotations

from xcute.cli.app import cli

if __name__ == "__main__":
    cli()
