"""Startup wiring for the Nust desktop app."""

from __future__ import annotations

import logging
import sys
from typing import Any

from .services.settings import Settings
from .utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)

APP_NAME = "Nust"


def configure_logging(level: int = logging.INFO) -> None:
    log_path = setup_logging(level)
    LOGGER.info("Nust starting (log file: %s)", log_path or "disabled")
    _forward_qt_messages()


def create_qapp() -> Any:
    """Return the running QApplication, creating it on first use."""

    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    return app


def build_window(settings: Settings) -> Any:
    """Assemble the dialogs, application state and main window."""

    from .ui.dialogs.file_dialogs import FileDialogProvider
    from .ui.main_window import MainWindow
    from .ui.state import ApplicationState

    window: MainWindow | None = None
    dialogs = FileDialogProvider(parent_provider=lambda: window, file_filter=settings.file_filter)
    state = ApplicationState(dialogs, settings=settings)
    window = MainWindow(state, settings=settings)
    return window


def main() -> int:
    """Entry point for the ``nust`` console script and ``python -m nust``."""

    configure_logging()
    app = create_qapp()
    window = build_window(Settings())
    window.show()
    exit_code = int(app.exec())
    LOGGER.info("Event loop finished with code %s", exit_code)
    return exit_code


def _forward_qt_messages() -> None:
    """Send Qt's own warnings through the ``PySide6`` logger."""

    try:
        from PySide6.QtCore import QtMsgType, qInstallMessageHandler
    except ImportError:  # pragma: no cover - headless test environments
        return

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }
    qt_logger = logging.getLogger("PySide6")

    def _handler(mode, context, message):  # type: ignore[no-untyped-def]
        del context
        qt_logger.log(levels.get(mode, logging.INFO), message)

    qInstallMessageHandler(_handler)
