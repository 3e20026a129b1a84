"""Toolkit-independent command palette state: query, filtering and selection."""

from __future__ import annotations

from typing import Sequence

from .models.actions import Action

__all__ = ["CommandPalette", "filter_actions"]


def filter_actions(actions: Sequence[Action], query: str) -> list[Action]:
    """Return the actions matching ``query`` in registration order.

    Labels match case-insensitively; ids match the lower-cased query as a
    plain substring. An empty query matches everything.
    """

    needle = query.lower()
    if not needle:
        return list(actions)
    return [
        entry
        for entry in actions
        if needle in entry.label.lower() or needle in entry.id
    ]


class CommandPalette:
    """Searchable, keyboard-navigable view over the action registry."""

    def __init__(self, actions: Sequence[Action]) -> None:
        self._actions: tuple[Action, ...] = tuple(actions)
        self.visible = False
        self.query = ""
        self.selected = 0

    @property
    def actions(self) -> tuple[Action, ...]:
        return self._actions

    def open(self) -> None:
        self.visible = True
        self.query = ""
        self.selected = 0

    def close(self) -> None:
        self.visible = False
        self.query = ""
        self.selected = 0

    def set_query(self, query: str) -> None:
        if query == self.query:
            return
        self.query = query
        self.selected = 0

    def filtered(self) -> list[Action]:
        matches = filter_actions(self._actions, self.query)
        self._clamp(len(matches))
        return matches

    def move_down(self) -> None:
        count = len(self.filtered())
        if count:
            self.selected = (self.selected + 1) % count

    def move_up(self) -> None:
        count = len(self.filtered())
        if count:
            self.selected = count - 1 if self.selected == 0 else self.selected - 1

    def current(self) -> Action | None:
        matches = self.filtered()
        if not matches:
            return None
        return matches[self.selected]

    def activate(self, index: int | None = None) -> Action | None:
        """Select ``index`` (or keep the current selection) and return that action.

        The caller dispatches the returned action and closes the palette.
        """

        matches = self.filtered()
        if index is not None:
            if not 0 <= index < len(matches):
                return None
            self.selected = index
        if not matches:
            return None
        return matches[self.selected]

    def _clamp(self, count: int) -> None:
        if count == 0:
            self.selected = 0
        elif self.selected >= count:
            self.selected = count - 1
