"""Qt widgets composing the main window."""

from .pane_editor import PaneEditor
from .status_bar import StatusBar

__all__ = ["PaneEditor", "StatusBar"]
