"""Text buffer model backing each of the two editor panes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..utils import file_io

__all__ = ["Pane", "PaneError", "NoPathError", "DIRTY_MARKER"]

LOGGER = logging.getLogger(__name__)

DIRTY_MARKER = "•"


class PaneError(Exception):
    """Base class for pane persistence failures."""


class NoPathError(PaneError):
    """Raised by :meth:`Pane.save` when the pane has never been saved or loaded."""

    def __init__(self, title: str) -> None:
        super().__init__("no path")
        self.title = title


@dataclass(slots=True)
class Pane:
    """One independent text buffer with its own file association and dirty state."""

    default_title: str
    title: str = ""
    path: Optional[Path] = None
    text: str = ""
    dirty: bool = False
    encoding: str = field(default="utf-8", repr=False)

    def __post_init__(self) -> None:
        if not self.title:
            self.title = self.default_title

    @property
    def display_title(self) -> str:
        """Title shown above the editor, flagged while there are unsaved changes."""

        return f"{self.title} {DIRTY_MARKER}" if self.dirty else self.title

    def set_text(self, text: str) -> None:
        """Replace the buffer contents, marking the pane dirty on change."""

        if text == self.text:
            return
        self.text = text
        self.dirty = True

    def load_from(self, path: Path | str) -> None:
        """Load ``path`` into the buffer. Unreadable files load as empty text."""

        target = Path(path)
        self.text = file_io.read_text_lossy(target, encoding=self.encoding)
        self._associate(target)
        LOGGER.debug("Pane %s loaded %s (%d chars)", self.default_title, target, len(self.text))

    def save_as(self, path: Path | str) -> None:
        """Write the buffer to ``path`` and adopt it as the pane's file.

        ``OSError`` from the write propagates and leaves the pane untouched.
        """

        target = Path(path)
        file_io.write_text(target, self.text, encoding=self.encoding)
        self._associate(target)
        LOGGER.debug("Pane %s saved as %s", self.default_title, target)

    def save(self) -> None:
        """Write the buffer back to its current path."""

        if self.path is None:
            raise NoPathError(self.title)
        file_io.write_text(self.path, self.text, encoding=self.encoding)
        self.dirty = False
        LOGGER.debug("Pane %s saved to %s", self.default_title, self.path)

    def reset(self) -> None:
        """Drop the buffer and its file association."""

        self.text = ""
        self.path = None
        self.dirty = False
        self.title = self.default_title

    def _associate(self, path: Path) -> None:
        self.title = path.name
        self.path = path
        self.dirty = False
