"""Nust: a minimal two-pane desktop note editor."""

__version__ = "0.1.0"

__all__ = ["__version__"]
