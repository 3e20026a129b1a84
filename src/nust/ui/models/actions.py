"""Action tags and the static action registry behind shortcuts and the palette."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

__all__ = [
    "AppAction",
    "Action",
    "COMMAND_PALETTE_SHORTCUT",
    "registered_actions",
    "normalize_shortcut",
    "find_action",
    "format_label",
]


class AppAction(Enum):
    """Closed set of operations the dispatcher understands."""

    OPEN_FILE = "open_file"
    SAVE_FOCUSED = "save_focused"
    SAVE_AS_FOCUSED = "save_as_focused"
    QUICK_SAVE_FOCUSED = "quick_save_focused"
    CLOSE_FOCUSED = "close_focused"
    SHOW_SPLIT_VIEW = "show_split_view"
    SHOW_LEFT_ONLY = "show_left_only"
    SHOW_RIGHT_ONLY = "show_right_only"


@dataclass(frozen=True, slots=True)
class Action:
    """A named, labelled command optionally bound to a keyboard shortcut."""

    id: str
    label: str
    shortcut: Optional[str]
    action: AppAction


COMMAND_PALETTE_SHORTCUT = "Ctrl+Shift+P"

_REGISTERED_ACTIONS: tuple[Action, ...] = (
    Action("open_file", "Open File (Focused Pane)", "Ctrl+O", AppAction.OPEN_FILE),
    Action("save_file", "Save", "Ctrl+S", AppAction.SAVE_FOCUSED),
    Action("save_file_as", "Save As", "Ctrl+Shift+S", AppAction.SAVE_AS_FOCUSED),
    Action("quick_save", "Quick Save", "Ctrl+Alt+S", AppAction.QUICK_SAVE_FOCUSED),
    Action("close_file", "Close File (Focused Pane)", "Ctrl+W", AppAction.CLOSE_FOCUSED),
    Action("layout_split", "Show Split View", "Ctrl+3", AppAction.SHOW_SPLIT_VIEW),
    Action("layout_left", "Show Left Only", "Ctrl+1", AppAction.SHOW_LEFT_ONLY),
    Action("layout_right", "Show Right Only", "Ctrl+2", AppAction.SHOW_RIGHT_ONLY),
)

_MODIFIER_ORDER: tuple[str, ...] = ("Ctrl", "Shift", "Alt", "Meta")
_MODIFIER_ALIASES = {
    "ctrl": "Ctrl",
    "control": "Ctrl",
    "shift": "Shift",
    "alt": "Alt",
    "option": "Alt",
    "meta": "Meta",
    "cmd": "Meta",
    "command": "Meta",
}


def registered_actions() -> tuple[Action, ...]:
    """Return the registry in display order."""

    return _REGISTERED_ACTIONS


def normalize_shortcut(shortcut: str) -> str:
    """Canonicalise a key combination such as ``"shift+ctrl+s"`` to ``"Ctrl+Shift+S"``."""

    parts = [part.strip() for part in shortcut.split("+")]
    modifiers: set[str] = set()
    keys: list[str] = []
    for part in parts:
        if not part:
            continue
        alias = _MODIFIER_ALIASES.get(part.lower())
        if alias is not None:
            modifiers.add(alias)
        else:
            keys.append(part.upper() if len(part) == 1 else part.title())
    ordered = [name for name in _MODIFIER_ORDER if name in modifiers]
    return "+".join(ordered + keys)


def find_action(shortcut: str, actions: Iterable[Action] | None = None) -> Action | None:
    """Return the first action bound to ``shortcut``, if any."""

    wanted = normalize_shortcut(shortcut)
    for entry in actions if actions is not None else _REGISTERED_ACTIONS:
        if entry.shortcut and normalize_shortcut(entry.shortcut) == wanted:
            return entry
    return None


def format_label(action: Action) -> str:
    if not action.shortcut:
        return action.label
    return f"{action.label} ({action.shortcut})"

