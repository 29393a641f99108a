"""Single source of truth for the xcute version string."""

__version__ = "1.2.0"
