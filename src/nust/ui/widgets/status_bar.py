"""Bottom status bar: last status message plus the focused-pane indicator."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QLabel, QStatusBar, QWidget

LOGGER = logging.getLogger(__name__)


class StatusBar(QStatusBar):
    """Status bar that remembers what it displays for inspection in tests."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("nust-status-bar")
        self.setSizeGripEnabled(False)
        self._message = ""
        self._focused_label = ""
        self._message_label = QLabel()
        self._message_label.setObjectName("nust-status-message")
        self._message_label.setContentsMargins(8, 0, 8, 0)
        self._focus_label = QLabel()
        self._focus_label.setObjectName("nust-status-focus")
        self._focus_label.setContentsMargins(8, 0, 8, 0)
        self.addWidget(self._message_label, 1)
        self.addPermanentWidget(self._focus_label)

    @property
    def message(self) -> str:
        return self._message

    @property
    def focus_text(self) -> str:
        return self._focused_label

    def set_message(self, message: str) -> None:
        if message == self._message:
            return
        self._message = message
        self._message_label.setText(message)
        LOGGER.debug("Status: %s", message)

    def set_focused_pane(self, label: str) -> None:
        text = f"Focused: {label}"
        if text == self._focused_label:
            return
        self._focused_label = text
        self._focus_label.setText(text)


__all__ = ["StatusBar"]
