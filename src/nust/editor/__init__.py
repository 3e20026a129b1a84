"""Editor package containing the pane buffer model."""

from .pane import DIRTY_MARKER, NoPathError, Pane, PaneError

__all__ = ["DIRTY_MARKER", "NoPathError", "Pane", "PaneError"]
