"""Application state machine: the two panes, focus, layout, modals and dispatch.

All user input (shortcuts, buttons, palette activations, editor edits) flows
through :class:`ApplicationState`; the Qt window only renders the result.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol, Sequence

from ..editor.pane import NoPathError, Pane
from ..services.settings import Settings
from ..utils import file_io
from .command_palette import CommandPalette
from .models.actions import (
    COMMAND_PALETTE_SHORTCUT,
    Action,
    AppAction,
    find_action,
    normalize_shortcut,
    registered_actions,
)

__all__ = ["ApplicationState", "FileDialogs", "FocusedPane", "LayoutMode"]

LOGGER = logging.getLogger(__name__)


class FocusedPane(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        return self.value.title()


class LayoutMode(Enum):
    SPLIT = "split"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"


class FileDialogs(Protocol):
    """Native file-picker collaborator; ``None`` means cancelled or unavailable."""

    def pick_file(self) -> Path | None:
        ...

    def save_file(self) -> Path | None:
        ...


class ApplicationState:
    """Owns both panes and turns actions into pane operations and status text."""

    def __init__(
        self,
        dialogs: FileDialogs,
        *,
        settings: Settings | None = None,
        actions: Sequence[Action] | None = None,
        clock: Callable[[], float] = time.time,
        cwd: Callable[[], Path] = lambda: Path(os.getcwd()),
        temp_dir: Callable[[], Path] = lambda: Path(tempfile.gettempdir()),
    ) -> None:
        self._dialogs = dialogs
        self._settings = settings or Settings()
        self._clock = clock
        self._cwd = cwd
        self._temp_dir = temp_dir
        self.actions: tuple[Action, ...] = tuple(actions or registered_actions())
        self.left = Pane(default_title="left")
        self.right = Pane(default_title="right")
        self.focused = FocusedPane.LEFT
        self.layout = LayoutMode.SPLIT
        self.status = "ready"
        self.manual_path = self._settings.manual_save_path
        self.save_as_visible = False
        self.save_as_input = ""
        self.palette = CommandPalette(self.actions)

    # ------------------------------------------------------------------
    # Focus and layout
    # ------------------------------------------------------------------
    @property
    def focused_pane(self) -> Pane:
        return self.pane(self.focused)

    def pane(self, which: FocusedPane) -> Pane:
        return self.left if which is FocusedPane.LEFT else self.right

    def focus(self, which: FocusedPane) -> None:
        """Record that ``which`` pane's editor holds input focus."""

        if which not in self.visible_panes():
            return
        self.focused = which

    def visible_panes(self) -> tuple[FocusedPane, ...]:
        if self.layout is LayoutMode.SPLIT:
            return (FocusedPane.LEFT, FocusedPane.RIGHT)
        if self.layout is LayoutMode.LEFT_ONLY:
            return (FocusedPane.LEFT,)
        return (FocusedPane.RIGHT,)

    def edit_text(self, which: FocusedPane, text: str) -> None:
        self.pane(which).set_text(text)

    @property
    def modal_open(self) -> bool:
        return self.palette.visible or self.save_as_visible

    # ------------------------------------------------------------------
    # Keyboard shortcuts and dispatch
    # ------------------------------------------------------------------
    def handle_shortcut(self, shortcut: str) -> bool:
        """Route a key combination; return ``True`` when it was consumed."""

        normalized = normalize_shortcut(shortcut)
        if normalized == normalize_shortcut(COMMAND_PALETTE_SHORTCUT):
            self.toggle_command_palette()
            return True
        if self.modal_open:
            return False
        entry = find_action(normalized, self.actions)
        if entry is None:
            return False
        self.perform_action(entry.action)
        return True

    def perform_action(self, action: AppAction) -> None:
        LOGGER.debug("Dispatching %s (focused=%s)", action.name, self.focused.value)
        if action is AppAction.OPEN_FILE:
            self.open_file()
        elif action is AppAction.SAVE_FOCUSED:
            self.save_focused()
        elif action is AppAction.SAVE_AS_FOCUSED:
            self.save_focused(force_as=True)
        elif action is AppAction.QUICK_SAVE_FOCUSED:
            self.quick_save_focused()
        elif action is AppAction.CLOSE_FOCUSED:
            self.close_focused()
        elif action is AppAction.SHOW_SPLIT_VIEW:
            if self.layout is LayoutMode.SPLIT:
                self.status = "Split view already active"
            else:
                self.layout = LayoutMode.SPLIT
                self.status = "Split view enabled"
        elif action is AppAction.SHOW_LEFT_ONLY:
            self.layout = LayoutMode.LEFT_ONLY
            self.focused = FocusedPane.LEFT
            self.status = "Single pane mode (showing left)"
        elif action is AppAction.SHOW_RIGHT_ONLY:
            self.layout = LayoutMode.RIGHT_ONLY
            self.focused = FocusedPane.RIGHT
            self.status = "Single pane mode (showing right)"
        else:  # pragma: no cover - exhaustive over AppAction
            raise ValueError(f"Unhandled action: {action!r}")

    # ------------------------------------------------------------------
    # Command palette
    # ------------------------------------------------------------------
    def toggle_command_palette(self) -> None:
        if self.palette.visible:
            self.close_command_palette()
        else:
            self.open_command_palette()

    def open_command_palette(self) -> None:
        self.palette.open()
        self.status = f"Command palette opened ({COMMAND_PALETTE_SHORTCUT} or Esc to close)"

    def close_command_palette(self) -> None:
        self.palette.close()
        self.status = "Command palette closed"

    def activate_palette_entry(self, index: int | None = None) -> bool:
        """Dispatch the selected (or clicked) palette entry and close the palette."""

        entry = self.palette.activate(index)
        if entry is None:
            return False
        self.perform_action(entry.action)
        self.palette.close()
        return True

    # ------------------------------------------------------------------
    # File operations
    # ------------------------------------------------------------------
    def open_file(self) -> None:
        self.status = "Opening file dialog..."
        path = self._dialogs.pick_file()
        if path is None:
            self.status = "Open cancelled"
            return
        self.status = f"Loading: {path}"
        self.focused_pane.load_from(path)
        self.status = "opened"

    def save_focused(self, *, force_as: bool = False) -> None:
        pane = self.focused_pane
        if force_as:
            self.save_as_focused()
            return
        if pane.path is not None:
            self.status = f"Saving to: {pane.path}"
        try:
            pane.save()
        except NoPathError:
            self.save_as_focused()
            return
        except OSError as exc:
            LOGGER.warning("Saving %s pane to %s failed: %s", self.focused.value, pane.path, exc)
            self.status = f"Save error: {exc}"
            return
        self.status = f"{self.focused.value} pane saved"

    def save_as_focused(self) -> None:
        """Ask the native dialog for a destination, falling back to the input modal."""

        path = self._dialogs.save_file()
        if path is None:
            self.save_as_visible = True
            self.status = "File dialog not available, using input dialog"
            return
        self.save_to_path(path)

    def save_to_path(self, path: Path | str) -> bool:
        target = Path(path)
        name = self.focused.value
        self.status = f"Saving {name} pane to: {target}"
        try:
            self.focused_pane.save_as(target)
        except OSError as exc:
            LOGGER.warning("Saving %s pane to %s failed: %s", name, target, exc)
            self.status = f"Save error: {exc}"
            return False
        self.status = f"{name} pane saved"
        return True

    def submit_save_as_input(self) -> None:
        """Confirm the fallback modal; blank input keeps the modal open."""

        value = self.save_as_input.strip()
        if not value:
            return
        self.save_to_path(Path(value))
        self.save_as_visible = False
        self.save_as_input = ""

    def cancel_save_as_input(self) -> None:
        self.save_as_visible = False
        self.save_as_input = ""

    def quick_save_focused(self) -> Path | None:
        name = self.focused.value
        fallback = file_io.fallback_quick_save_dir(self._temp_dir())
        try:
            primary = self._settings.quick_save_path or file_io.default_quick_save_dir(self._cwd())
        except OSError as exc:
            LOGGER.warning("Working directory unavailable, quick saving to %s: %s", fallback, exc)
            primary = fallback
        try:
            directory = file_io.resolve_quick_save_dir(primary, fallback)
        except OSError as exc:
            self.status = f"Quick save failed: {exc}"
            return None

        target = directory / file_io.quick_save_filename(name, self._clock())
        self.status = f"Quick saving {name} pane to {target}..."
        try:
            self.focused_pane.save_as(target)
        except OSError as exc:
            LOGGER.warning("Quick save to %s failed: %s", target, exc)
            self.status = f"Quick save failed: {exc}"
            return None
        self.status = f"{name} pane quick save successful: {target}"
        return target

    def close_focused(self) -> None:
        self.focused_pane.reset()
        self.status = f"{self.focused.value} pane cleared"

    def manual_save(self) -> None:
        raw = self.manual_path.strip()
        if not raw:
            self.status = "Please enter a filename"
            return
        target = Path(raw)
        name = self.focused.value
        try:
            file_io.ensure_directory(target.parent)
        except OSError as exc:
            LOGGER.warning("Could not create %s: %s", target.parent, exc)
            self.status = f"Failed to create directory: {exc}"
            return
        self.status = f"Saving {name} pane to {target}..."
        try:
            self.focused_pane.save_as(target)
        except OSError as exc:
            LOGGER.warning("Manual save to %s failed: %s", target, exc)
            self.status = f"Manual save failed: {exc}"
            return
        self.status = "Manual save successful!"
