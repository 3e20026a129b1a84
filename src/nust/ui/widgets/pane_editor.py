"""Editor widget for a single pane: a heading over a plain-text editor."""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtGui import QFont, QFocusEvent
from PySide6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from ...editor.pane import Pane


class _FocusAwareTextEdit(QPlainTextEdit):
    def __init__(self, on_focus: Callable[[], Any], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._on_focus = on_focus

    def focusInEvent(self, event: QFocusEvent) -> None:  # noqa: N802 - Qt API
        super().focusInEvent(event)
        self._on_focus()


class PaneEditor(QWidget):
    """Renders a :class:`Pane` and reports edits and focus changes."""

    def __init__(
        self,
        *,
        on_text_changed: Callable[[str], Any],
        on_focus: Callable[[], Any],
        font_family: str = "Monospace",
        font_size: int = 11,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_text_changed = on_text_changed
        self._syncing = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)
        self._heading = QLabel()
        heading_font = self._heading.font()
        heading_font.setPointSize(heading_font.pointSize() + 4)
        heading_font.setBold(True)
        self._heading.setFont(heading_font)
        layout.addWidget(self._heading)

        self._editor = _FocusAwareTextEdit(on_focus)
        font = QFont(font_family, font_size)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self._editor.setFont(font)
        self._editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self._editor.textChanged.connect(self._handle_text_changed)
        layout.addWidget(self._editor, 1)

    @property
    def heading(self) -> QLabel:
        return self._heading

    @property
    def editor(self) -> QPlainTextEdit:
        return self._editor

    def sync(self, pane: Pane) -> None:
        """Mirror the pane model without echoing the change back."""

        self._heading.setText(pane.display_title)
        if self._editor.toPlainText() == pane.text:
            return
        self._syncing = True
        try:
            self._editor.setPlainText(pane.text)
        finally:
            self._syncing = False

    def _handle_text_changed(self) -> None:
        if self._syncing:
            return
        self._on_text_changed(self._editor.toPlainText())


__all__ = ["PaneEditor"]
