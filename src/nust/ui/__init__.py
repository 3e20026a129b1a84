"""UI package: the toolkit-independent state machine plus its Qt presentation.

Only the state machine is re-exported here so that importing :mod:`nust.ui`
does not pull in PySide6; import :mod:`nust.ui.main_window` for the window.
"""

from .command_palette import CommandPalette, filter_actions
from .models.actions import Action, AppAction, registered_actions
from .state import ApplicationState, FileDialogs, FocusedPane, LayoutMode

__all__ = [
    "Action",
    "AppAction",
    "ApplicationState",
    "CommandPalette",
    "FileDialogs",
    "FocusedPane",
    "LayoutMode",
    "filter_actions",
    "registered_actions",
]
