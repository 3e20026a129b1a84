"""Qt rendering of the command palette."""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtWidgets import (
    QDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..command_palette import CommandPalette
from ..models.actions import format_label


class CommandPaletteDialog(QDialog):
    """Searchable palette window driven by a :class:`CommandPalette` model.

    Key presses in the search field are translated into palette operations;
    ``on_activate``/``on_dismiss`` hand control back to the application state
    so it can dispatch the chosen action and refresh the window.
    """

    def __init__(
        self,
        palette: CommandPalette,
        *,
        on_activate: Callable[[int | None], Any],
        on_dismiss: Callable[[], Any],
        on_query_changed: Callable[[], Any] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._palette = palette
        self._on_activate = on_activate
        self._on_dismiss = on_dismiss
        self._on_query_changed = on_query_changed
        self._syncing = False

        self.setWindowTitle("Command Palette")
        self.setObjectName("nust-command-palette")
        self.setModal(False)
        self.setWindowFlag(Qt.WindowType.Tool, True)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Type to filter commands. Enter runs the first result."))
        self._search_input = QLineEdit()
        self._search_input.setPlaceholderText("Search commands…")
        self._search_input.textChanged.connect(self._handle_query_changed)
        self._search_input.installEventFilter(self)
        layout.addWidget(self._search_input)
        self._empty_label = QLabel("No matching commands.")
        layout.addWidget(self._empty_label)
        self._list_widget = QListWidget()
        self._list_widget.itemClicked.connect(self._handle_item_clicked)
        layout.addWidget(self._list_widget)

    @property
    def search_input(self) -> QLineEdit:
        return self._search_input

    @property
    def list_widget(self) -> QListWidget:
        return self._list_widget

    def sync(self) -> None:
        """Mirror the palette model: visibility, query, entries and selection."""

        self._syncing = True
        try:
            if self._search_input.text() != self._palette.query:
                self._search_input.setText(self._palette.query)
            self._render_entries()
        finally:
            self._syncing = False
        if self._palette.visible and not self.isVisible():
            self.show()
            self.raise_()
            self.activateWindow()
            self._search_input.setFocus()
        elif not self._palette.visible and self.isVisible():
            self.hide()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt API
        if watched is self._search_input and event.type() == QEvent.Type.KeyPress:
            key = event.key()  # type: ignore[attr-defined]
            if key == Qt.Key.Key_Down:
                self._palette.move_down()
                self._render_entries()
                return True
            if key == Qt.Key.Key_Up:
                self._palette.move_up()
                self._render_entries()
                return True
            if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
                self._on_activate(None)
                return True
            if key == Qt.Key.Key_Escape:
                self._on_dismiss()
                return True
        return super().eventFilter(watched, event)

    def reject(self) -> None:
        # Window close button / Esc outside the search field.
        self._on_dismiss()

    def _handle_query_changed(self, text: str) -> None:
        if self._syncing:
            return
        self._palette.set_query(text)
        self._render_entries()
        if self._on_query_changed is not None:
            self._on_query_changed()

    def _handle_item_clicked(self, item: QListWidgetItem) -> None:
        self._on_activate(self._list_widget.row(item))

    def _render_entries(self) -> None:
        matches = self._palette.filtered()
        self._list_widget.clear()
        for entry in matches:
            item = QListWidgetItem(format_label(entry))
            item.setData(Qt.ItemDataRole.UserRole, entry.id)
            self._list_widget.addItem(item)
        self._empty_label.setVisible(not matches)
        if matches:
            self._list_widget.setCurrentRow(self._palette.selected)


__all__ = ["CommandPaletteDialog"]
