"""Qt presentation tests for the main window, palette and pane widgets."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import Qt  # noqa: E402

from nust.editor.pane import DIRTY_MARKER  # noqa: E402
from nust.ui import main_window as main_window_module  # noqa: E402
from nust.ui.main_window import MainWindow  # noqa: E402
from nust.ui.models.actions import AppAction  # noqa: E402
from nust.ui.state import ApplicationState, FocusedPane, LayoutMode  # noqa: E402


@pytest.fixture
def window(qtbot, app_state: ApplicationState) -> MainWindow:
    win = MainWindow(app_state)
    qtbot.addWidget(win)
    win.show()
    return win


def _click(qtbot, widget) -> None:
    qtbot.mouseClick(widget, Qt.MouseButton.LeftButton)


def test_window_renders_initial_state(window: MainWindow) -> None:
    assert window.windowTitle() == "Nust"
    assert window.status_bar.message == "ready"
    assert window.status_bar.focus_text == "Focused: Left"
    assert window.left_editor.heading.text() == "left"
    assert window.right_editor.heading.text() == "right"
    assert window.manual_path_input.text() == "target/quick_saves/output.txt"
    assert [button.text() for button in window.action_buttons.values()] == ["Open", "Save", "Save As", "Quick Save"]


def test_typing_marks_pane_dirty(qtbot, window: MainWindow, app_state: ApplicationState) -> None:
    qtbot.keyClicks(window.left_editor.editor, "typed")

    assert app_state.left.text == "typed"
    assert app_state.left.dirty is True
    assert window.left_editor.heading.text() == f"left {DIRTY_MARKER}"


def test_refresh_does_not_echo_state_back_as_edit(window: MainWindow, app_state: ApplicationState, tmp_path: Path) -> None:
    source = tmp_path / "loaded.txt"
    source.write_text("from disk", encoding="utf-8")
    app_state.right.load_from(source)

    window.refresh()

    assert window.right_editor.editor.toPlainText() == "from disk"
    assert app_state.right.dirty is False
    assert window.right_editor.heading.text() == "loaded.txt"


def test_open_button_loads_picked_file(qtbot, window: MainWindow, app_state: ApplicationState, dialogs, tmp_path: Path) -> None:
    source = tmp_path / "picked.md"
    source.write_text("# picked", encoding="utf-8")
    dialogs.open_path = source

    _click(qtbot, window.action_buttons[AppAction.OPEN_FILE])

    assert dialogs.calls == ["pick_file"]
    assert window.left_editor.editor.toPlainText() == "# picked"
    assert window.left_editor.heading.text() == "picked.md"
    assert window.status_bar.message == "opened"


def test_save_button_writes_known_path(qtbot, window: MainWindow, app_state: ApplicationState, tmp_path: Path) -> None:
    target = tmp_path / "known.txt"
    target.write_text("old", encoding="utf-8")
    app_state.left.load_from(target)
    app_state.edit_text(FocusedPane.LEFT, "new body")

    _click(qtbot, window.action_buttons[AppAction.SAVE_FOCUSED])

    assert target.read_text(encoding="utf-8") == "new body"
    assert window.status_bar.message == "left pane saved"
    assert window.left_editor.heading.text() == "known.txt"


def test_save_as_button_uses_native_dialog(qtbot, window: MainWindow, app_state: ApplicationState, dialogs, tmp_path: Path) -> None:
    dialogs.save_path = tmp_path / "chosen.txt"
    app_state.edit_text(FocusedPane.LEFT, "chosen body")

    _click(qtbot, window.action_buttons[AppAction.SAVE_AS_FOCUSED])

    assert dialogs.calls == ["save_file"]
    assert dialogs.save_path.read_text(encoding="utf-8") == "chosen body"
    assert window.left_editor.heading.text() == "chosen.txt"


def test_quick_save_button_writes_timestamped_file(
    qtbot, window: MainWindow, app_state: ApplicationState, clock, tmp_path: Path
) -> None:
    app_state.edit_text(FocusedPane.LEFT, "quick")

    _click(qtbot, window.action_buttons[AppAction.QUICK_SAVE_FOCUSED])

    expected = tmp_path / "work" / "target" / "quick_saves" / f"nust_left_{int(clock.now)}.txt"
    assert expected.read_text(encoding="utf-8") == "quick"
    assert window.status_bar.message == f"left pane quick save successful: {expected}"


def test_exit_button_quits_application(qtbot, window: MainWindow, monkeypatch: pytest.MonkeyPatch) -> None:
    quits: list[str] = []

    class _RecordingApp:
        def quit(self) -> None:
            quits.append("quit")

    class _FakeQApplication:
        @staticmethod
        def instance() -> _RecordingApp:
            return _RecordingApp()

    monkeypatch.setattr(main_window_module, "QApplication", _FakeQApplication)
    exit_button = next(
        button for button in window.menuWidget().findChildren(main_window_module.QPushButton) if button.text() == "Exit"
    )

    _click(qtbot, exit_button)

    assert quits == ["quit"]


def test_layout_shortcut_hides_other_pane(window: MainWindow, app_state: ApplicationState) -> None:
    window._handle_shortcut("Ctrl+2")  # noqa: SLF001 - QShortcut activation path

    assert app_state.layout is LayoutMode.RIGHT_ONLY
    assert window.left_editor.isHidden() is True
    assert window.right_editor.isHidden() is False
    assert window.status_bar.focus_text == "Focused: Right"


def test_manual_path_field_feeds_state(qtbot, window: MainWindow, app_state: ApplicationState) -> None:
    window.manual_path_input.clear()
    qtbot.keyClicks(window.manual_path_input, "notes/out.txt")

    assert app_state.manual_path == "notes/out.txt"


def test_palette_dialog_navigation_and_activation(qtbot, window: MainWindow, app_state: ApplicationState) -> None:
    app_state.edit_text(FocusedPane.LEFT, "text")
    window._handle_shortcut("Ctrl+Shift+P")  # noqa: SLF001
    dialog = window.palette_dialog
    assert dialog.isVisible() is True

    qtbot.keyClicks(dialog.search_input, "show")
    assert dialog.list_widget.count() == 3
    qtbot.keyClick(dialog.search_input, Qt.Key.Key_Up)
    assert dialog.list_widget.currentRow() == 2
    qtbot.keyClick(dialog.search_input, Qt.Key.Key_Return)

    assert app_state.layout is LayoutMode.RIGHT_ONLY
    assert app_state.palette.visible is False
    assert dialog.isVisible() is False


def test_palette_escape_closes_without_dispatch(qtbot, window: MainWindow, app_state: ApplicationState) -> None:
    window._handle_shortcut("Ctrl+Shift+P")  # noqa: SLF001

    qtbot.keyClick(window.palette_dialog.search_input, Qt.Key.Key_Escape)

    assert app_state.palette.visible is False
    assert app_state.layout is LayoutMode.SPLIT
    assert window.status_bar.message == "Command palette closed"


def test_save_as_fallback_dialog_round_trip(qtbot, window: MainWindow, app_state: ApplicationState, tmp_path: Path) -> None:
    app_state.edit_text(FocusedPane.LEFT, "fallback body")
    window._handle_shortcut("Ctrl+Shift+S")  # noqa: SLF001
    dialog = window.save_as_dialog
    assert dialog.isVisible() is True

    qtbot.keyClicks(dialog.path_input, str(tmp_path / "fallback.txt"))
    qtbot.keyClick(dialog.path_input, Qt.Key.Key_Return)

    assert (tmp_path / "fallback.txt").read_text(encoding="utf-8") == "fallback body"
    assert app_state.save_as_visible is False
    assert dialog.isVisible() is False
    assert window.left_editor.heading.text() == "fallback.txt"
