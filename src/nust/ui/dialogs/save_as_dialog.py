"""In-app filename prompt used when no native save dialog is available."""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)


class SaveAsInputDialog(QDialog):
    """Single-line filename input with Save/Cancel buttons."""

    def __init__(
        self,
        *,
        on_text_changed: Callable[[str], Any],
        on_submit: Callable[[], Any],
        on_cancel: Callable[[], Any],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_text_changed = on_text_changed
        self._on_submit = on_submit
        self._on_cancel = on_cancel

        self.setWindowTitle("Save As")
        self.setObjectName("nust-save-as")
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Enter filename:"))
        self._path_input = QLineEdit()
        self._path_input.textChanged.connect(self._on_text_changed)
        self._path_input.returnPressed.connect(lambda: self._on_submit())
        layout.addWidget(self._path_input)

        buttons = QHBoxLayout()
        save_button = QPushButton("Save")
        save_button.setAutoDefault(False)
        save_button.clicked.connect(lambda _checked=False: self._on_submit())
        cancel_button = QPushButton("Cancel")
        cancel_button.setAutoDefault(False)
        cancel_button.clicked.connect(lambda _checked=False: self._on_cancel())
        buttons.addWidget(save_button)
        buttons.addWidget(cancel_button)
        layout.addLayout(buttons)

    @property
    def path_input(self) -> QLineEdit:
        return self._path_input

    def sync(self, visible: bool, text: str) -> None:
        if self._path_input.text() != text:
            self._path_input.blockSignals(True)
            self._path_input.setText(text)
            self._path_input.blockSignals(False)
        if visible and not self.isVisible():
            self.show()
            self._path_input.setFocus()
        elif not visible and self.isVisible():
            self.hide()

    def reject(self) -> None:
        self._on_cancel()


__all__ = ["SaveAsInputDialog"]
