"""Main window shell.

The window owns the widgets and forwards every user interaction into
:class:`~nust.ui.state.ApplicationState`, then re-renders from that state:

1. Top bar with the command palette, file action buttons, manual save path and Exit
2. A splitter holding the left and right pane editors
3. Status bar with the last message and the focused pane
4. Shortcuts for the palette and every registered action
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QSplitter,
    QWidget,
)

from ..services.settings import Settings
from .dialogs import CommandPaletteDialog, SaveAsInputDialog
from .models.actions import COMMAND_PALETTE_SHORTCUT, AppAction
from .state import ApplicationState, FocusedPane, LayoutMode
from .widgets.pane_editor import PaneEditor
from .widgets.status_bar import StatusBar

LOGGER = logging.getLogger(__name__)

WINDOW_APP_NAME = "Nust"

_TOP_BAR_ACTIONS: tuple[tuple[str, AppAction], ...] = (
    ("Open", AppAction.OPEN_FILE),
    ("Save", AppAction.SAVE_FOCUSED),
    ("Save As", AppAction.SAVE_AS_FOCUSED),
    ("Quick Save", AppAction.QUICK_SAVE_FOCUSED),
)


class MainWindow(QMainWindow):
    """Two-pane editor window rendering an :class:`ApplicationState`.

    Example:
        state = ApplicationState(FileDialogProvider())
        window = MainWindow(state)
        window.show()
    """

    def __init__(self, state: ApplicationState, *, settings: Settings | None = None) -> None:
        super().__init__()
        self._state = state
        self._settings = settings or Settings()
        self._shortcuts: list[QShortcut] = []

        self.setWindowTitle(WINDOW_APP_NAME)
        self.resize(self._settings.window_width, self._settings.window_height)

        self._create_top_bar()
        self._create_panes()
        self._status_bar = StatusBar()
        self.setStatusBar(self._status_bar)
        self._palette_dialog = CommandPaletteDialog(
            state.palette,
            on_activate=self._wrap(state.activate_palette_entry),
            on_dismiss=self._wrap(state.close_command_palette),
            parent=self,
        )
        self._save_as_dialog = SaveAsInputDialog(
            on_text_changed=self._handle_save_as_text,
            on_submit=self._wrap(state.submit_save_as_input),
            on_cancel=self._wrap(state.cancel_save_as_input),
            parent=self,
        )
        self._install_shortcuts()
        self.refresh()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def status_bar(self) -> StatusBar:
        return self._status_bar

    @property
    def left_editor(self) -> PaneEditor:
        return self._left_editor

    @property
    def right_editor(self) -> PaneEditor:
        return self._right_editor

    @property
    def manual_path_input(self) -> QLineEdit:
        return self._manual_path_input

    @property
    def action_buttons(self) -> dict[AppAction, QPushButton]:
        return dict(self._action_buttons)

    @property
    def palette_dialog(self) -> CommandPaletteDialog:
        return self._palette_dialog

    @property
    def save_as_dialog(self) -> SaveAsInputDialog:
        return self._save_as_dialog

    # ------------------------------------------------------------------
    # Widget creation
    # ------------------------------------------------------------------
    def _create_top_bar(self) -> None:
        bar = QWidget()
        bar.setObjectName("nust-top-bar")
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(6, 4, 6, 4)

        palette_button = QPushButton("📋 Command Palette")
        palette_button.clicked.connect(lambda _checked=False: self._run(self._state.toggle_command_palette))
        layout.addWidget(palette_button)
        layout.addWidget(QLabel(f"({COMMAND_PALETTE_SHORTCUT})"))
        layout.addSpacing(12)

        self._action_buttons: dict[AppAction, QPushButton] = {}
        for label, action in _TOP_BAR_ACTIONS:
            button = QPushButton(label)
            button.clicked.connect(lambda _checked=False, action=action: self._run_action(action))
            layout.addWidget(button)
            self._action_buttons[action] = button
        layout.addSpacing(12)

        layout.addWidget(QLabel("Save to:"))
        self._manual_path_input = QLineEdit(self._state.manual_path)
        self._manual_path_input.textChanged.connect(self._handle_manual_path)
        layout.addWidget(self._manual_path_input, 1)
        save_button = QPushButton("Save")
        save_button.clicked.connect(lambda _checked=False: self._run(self._state.manual_save))
        layout.addWidget(save_button)
        layout.addSpacing(12)

        exit_button = QPushButton("Exit")
        exit_button.clicked.connect(lambda _checked=False: self._handle_exit())
        layout.addWidget(exit_button)
        self.setMenuWidget(bar)

    def _create_panes(self) -> None:
        font_family = self._settings.font_family
        font_size = self._settings.font_size
        self._left_editor = PaneEditor(
            on_text_changed=lambda text: self._handle_edit(FocusedPane.LEFT, text),
            on_focus=lambda: self._handle_focus(FocusedPane.LEFT),
            font_family=font_family,
            font_size=font_size,
        )
        self._right_editor = PaneEditor(
            on_text_changed=lambda text: self._handle_edit(FocusedPane.RIGHT, text),
            on_focus=lambda: self._handle_focus(FocusedPane.RIGHT),
            font_family=font_family,
            font_size=font_size,
        )
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)
        splitter.addWidget(self._left_editor)
        splitter.addWidget(self._right_editor)
        left_width = self._settings.left_pane_width
        splitter.setSizes([left_width, max(self._settings.window_width - left_width, 1)])
        self._splitter = splitter
        self.setCentralWidget(splitter)

    def _install_shortcuts(self) -> None:
        bindings = [COMMAND_PALETTE_SHORTCUT]
        bindings.extend(entry.shortcut for entry in self._state.actions if entry.shortcut)
        for binding in bindings:
            shortcut = QShortcut(QKeySequence(binding), self)
            shortcut.setContext(Qt.ShortcutContext.ApplicationShortcut)
            shortcut.activated.connect(lambda binding=binding: self._handle_shortcut(binding))
            self._shortcuts.append(shortcut)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Re-render every widget from the application state."""

        state = self._state
        self._left_editor.sync(state.left)
        self._right_editor.sync(state.right)
        visible = state.visible_panes()
        self._left_editor.setVisible(FocusedPane.LEFT in visible)
        self._right_editor.setVisible(FocusedPane.RIGHT in visible)
        if self._manual_path_input.text() != state.manual_path:
            self._manual_path_input.setText(state.manual_path)
        self._status_bar.set_message(state.status)
        self._status_bar.set_focused_pane(state.focused.label)
        self._palette_dialog.sync()
        self._save_as_dialog.sync(state.save_as_visible, state.save_as_input)
        if state.layout is not LayoutMode.SPLIT and not state.modal_open:
            editor = self._left_editor if state.focused is FocusedPane.LEFT else self._right_editor
            editor.editor.setFocus()

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------
    def _wrap(self, callback: Callable[..., Any]) -> Callable[..., None]:
        def handler(*args: Any) -> None:
            callback(*args)
            self.refresh()

        return handler

    def _run(self, callback: Callable[[], Any]) -> None:
        callback()
        self.refresh()

    def _run_action(self, action: AppAction) -> None:
        self._state.perform_action(action)
        self.refresh()

    def _handle_shortcut(self, binding: str) -> None:
        if self._state.handle_shortcut(binding):
            self.refresh()

    def _handle_edit(self, which: FocusedPane, text: str) -> None:
        self._state.edit_text(which, text)
        editor = self._left_editor if which is FocusedPane.LEFT else self._right_editor
        editor.heading.setText(self._state.pane(which).display_title)

    def _handle_focus(self, which: FocusedPane) -> None:
        self._state.focus(which)
        self._status_bar.set_focused_pane(self._state.focused.label)

    def _handle_manual_path(self, text: str) -> None:
        self._state.manual_path = text

    def _handle_save_as_text(self, text: str) -> None:
        self._state.save_as_input = text

    def _handle_exit(self) -> None:
        LOGGER.info("Exit requested from the top bar")
        app = QApplication.instance()
        if app is not None:
            app.quit()
        else:  # pragma: no cover - window used without an application
            self.close()


__all__ = ["MainWindow", "WINDOW_APP_NAME"]
