"""xcute — run a command template once per line of standard input.

Each non-empty input line replaces the ``{}`` marker in the template,
either inside an argument vector (direct mode) or inside a single
``sh -c`` string (shell mode).
"""

from xcute.version import __version__

__all__: list[str] = ["__version__"]
