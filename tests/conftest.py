"""Shared pytest fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from nust.ui.state import ApplicationState

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeDialogs:
    """Scripted stand-in for the native file pickers."""

    def __init__(self, *, open_path: Path | None = None, save_path: Path | None = None) -> None:
        self.open_path = open_path
        self.save_path = save_path
        self.calls: list[str] = []

    def pick_file(self) -> Path | None:
        self.calls.append("pick_file")
        return self.open_path

    def save_file(self) -> Path | None:
        self.calls.append("save_file")
        return self.save_path


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app_state(dialogs: FakeDialogs, clock: FakeClock, tmp_path: Path) -> ApplicationState:
    return ApplicationState(
        dialogs,
        clock=clock,
        cwd=lambda: tmp_path / "work",
        temp_dir=lambda: tmp_path / "tmp",
    )
