"""Native open/save dialogs backing the editor's file actions.

:class:`FileDialogProvider` satisfies the ``FileDialogs`` collaborator used by
:class:`nust.ui.state.ApplicationState`. Both prompts return ``None`` when the
user cancels or when no Qt dialog service can be reached, which makes the
state machine fall back to its in-app filename input.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from PySide6.QtWidgets import QWidget

LOGGER = logging.getLogger(__name__)

DEFAULT_FILE_FILTER = "Text/Markdown (*.txt *.md *.log)"


class FileDialogProvider:
    """Provider for the native file open and save dialogs.

    Example:
        provider = FileDialogProvider(parent_provider=lambda: main_window)

        path = provider.pick_file()
        if path:
            # User selected a file
            ...
    """

    __slots__ = ("_parent_provider", "_start_dir_resolver", "_file_filter")

    def __init__(
        self,
        *,
        parent_provider: Callable[[], "QWidget | None"] | None = None,
        start_dir_resolver: Callable[[], Path | None] | None = None,
        file_filter: str = DEFAULT_FILE_FILTER,
    ) -> None:
        """Initialize the dialog provider.

        Args:
            parent_provider: Function returning the parent widget for dialogs.
            start_dir_resolver: Function returning the starting directory.
            file_filter: Qt name filter applied to both dialogs.
        """
        self._parent_provider = parent_provider
        self._start_dir_resolver = start_dir_resolver
        self._file_filter = file_filter

    def pick_file(self) -> Path | None:
        """Prompt for a file to open. Returns ``None`` if cancelled."""

        return self._prompt("Open", save=False)

    def save_file(self) -> Path | None:
        """Prompt for a save destination. Returns ``None`` if cancelled."""

        return self._prompt("Save As", save=True)

    def _prompt(self, caption: str, *, save: bool) -> Path | None:
        try:
            from PySide6.QtWidgets import QFileDialog
        except ImportError as exc:  # pragma: no cover - depends on desktop stack
            LOGGER.warning("File dialogs require PySide6: %s", exc)
            return None

        parent = self._parent_provider() if self._parent_provider else None
        start_dir = self._start_dir_resolver() if self._start_dir_resolver else None
        directory = str(start_dir) if start_dir else ""
        if save:
            selected, _ = QFileDialog.getSaveFileName(parent, caption, directory, self._file_filter)
        else:
            selected, _ = QFileDialog.getOpenFileName(parent, caption, directory, self._file_filter)
        if not selected:
            LOGGER.debug("%s dialog dismissed without a selection", caption)
            return None
        return Path(selected)


__all__ = ["DEFAULT_FILE_FILTER", "FileDialogProvider"]
