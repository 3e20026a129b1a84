"""Dialog implementations for the editor window.

Dialogs:
    - FileDialogProvider: Native open/save file dialogs
    - CommandPaletteDialog: Searchable command palette
    - SaveAsInputDialog: Fallback filename prompt
"""

from __future__ import annotations

from .command_palette import CommandPaletteDialog
from .file_dialogs import DEFAULT_FILE_FILTER, FileDialogProvider
from .save_as_dialog import SaveAsInputDialog

__all__: list[str] = [
    "CommandPaletteDialog",
    "DEFAULT_FILE_FILTER",
    "FileDialogProvider",
    "SaveAsInputDialog",
]
