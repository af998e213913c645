"""Checklist model: state, key handling and rendering.

The model is a value. ``update`` never mutates it; it returns a new model
together with an optional :class:`Command` for the runtime to carry out.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from checklist.ui.styles import (
    CHOICE_STYLE,
    CURSOR_STYLE,
    FOOTER_STYLE,
    HEADER_PADDING,
    HEADER_STYLE,
    SELECTED_STYLE,
    render,
)

DEFAULT_ITEMS: tuple[str, ...] = ("Buy carrots", "Buy celery", "Buy kohlrabi")

HEADER_TEXT = "What should we buy at the market?"
FOOTER_TEXT = "Press q to quit."

QUIT_KEYS = frozenset({"ctrl+c", "q"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
TOGGLE_KEYS = frozenset({"enter", " "})


class Command(Enum):
    """Side effects the model can ask the runtime to perform."""

    QUIT = "quit"


@dataclass(frozen=True)
class KeyPress:
    """A key-press event carrying a canonical key name (``" "`` for space)."""

    key: str


@dataclass(frozen=True)
class ChecklistModel:
    """Immutable checklist state.

    Attributes:
        items: Row labels, fixed at startup
        cursor: Index of the highlighted row
        selected: Indices of checked rows
    """

    items: tuple[str, ...] = DEFAULT_ITEMS
    cursor: int = 0
    selected: frozenset[int] = frozenset()

    def init(self) -> Command | None:
        """No I/O at startup."""
        return None

    def update(self, msg: object) -> tuple[ChecklistModel, Command | None]:
        """Apply one event and return the next model and an optional command."""
        if not isinstance(msg, KeyPress):
            return self, None

        key = msg.key
        if key in QUIT_KEYS:
            return self, Command.QUIT
        if key in UP_KEYS:
            if self.cursor > 0:
                return replace(self, cursor=self.cursor - 1), None
        elif key in DOWN_KEYS:
            if self.cursor < len(self.items) - 1:
                return replace(self, cursor=self.cursor + 1), None
        elif key in TOGGLE_KEYS:
            return replace(self, selected=self.selected ^ {self.cursor}), None
        return self, None

    def view(self) -> str:
        """Render the checklist as an ANSI-styled string."""
        parts = [render(HEADER_STYLE, f"{HEADER_TEXT}\n\n", padding=HEADER_PADDING)]

        for i, choice in enumerate(self.items):
            cursor = render(CURSOR_STYLE, ">") if i == self.cursor else " "
            checked = render(SELECTED_STYLE, "x") if i in self.selected else " "
            parts.append(f"{cursor}[{checked}] {render(CHOICE_STYLE, choice)}\n")

        parts.append(render(FOOTER_STYLE, f"\n{FOOTER_TEXT}\n"))
        return "".join(parts)


def initial_model() -> ChecklistModel:
    """Create the startup state: cursor on the first row, nothing selected."""
    return ChecklistModel()


__all__ = [
    "ChecklistModel",
    "Command",
    "DEFAULT_ITEMS",
    "FOOTER_TEXT",
    "HEADER_TEXT",
    "KeyPress",
    "initial_model",
]
