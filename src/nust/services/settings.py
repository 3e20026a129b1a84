"""Built-in defaults for the editor window.

Nothing here is read from or written to disk; a ``Settings`` instance is
constructed once at startup and handed to the state and the window.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["Settings", "DEFAULT_MANUAL_SAVE_PATH"]

DEFAULT_MANUAL_SAVE_PATH = "target/quick_saves/output.txt"


@dataclass(slots=True)
class Settings:
    """Window geometry, fonts and save locations for a single editor session."""

    manual_save_path: str = DEFAULT_MANUAL_SAVE_PATH
    quick_save_dir: str | None = None
    file_extensions: list[str] | None = None
    window_width: int = 1000
    window_height: int = 700
    left_pane_width: int = 420
    font_family: str = "Monospace"
    font_size: int = 11

    def __post_init__(self) -> None:
        if self.file_extensions is None:
            self.file_extensions = ["txt", "md", "log"]

    @property
    def quick_save_path(self) -> Path | None:
        if not self.quick_save_dir:
            return None
        return Path(self.quick_save_dir).expanduser()

    @property
    def file_filter(self) -> str:
        """Qt name filter for the open/save dialogs."""

        patterns = " ".join(f"*.{ext.lstrip('.')}" for ext in self.file_extensions or [])
        return f"Text/Markdown ({patterns})"
