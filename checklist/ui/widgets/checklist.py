"""ChecklistWidget — Textual host for the checklist model.

Feeds key presses into :meth:`ChecklistModel.update`, carries out the
returned command and paints :meth:`ChecklistModel.view`.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from checklist.model import ChecklistModel, Command, KeyPress, initial_model

logger = logging.getLogger(__name__)

# Textual names a few keys differently from the model's key table.
_KEY_ALIASES = {
    "space": " ",
}


def normalize_key(key: str) -> str:
    """Translate a Textual key name into the model's canonical key name."""
    return _KEY_ALIASES.get(key, key)


class ChecklistWidget(Widget):
    """Displays the checklist and routes every key press through the model."""

    DEFAULT_CSS = """
    ChecklistWidget {
        height: auto;
    }
    """

    can_focus = True

    # ctrl+c is claimed ahead of any framework binding; it still goes
    # through the model like every other key.
    BINDINGS = [
        Binding("ctrl+c", "feed_key('ctrl+c')", show=False, priority=True),
    ]

    model: reactive[ChecklistModel] = reactive(initial_model, repaint=True)

    # -- custom message --------------------------------------------------------

    class Changed(Message):
        """Emitted after the model has been replaced."""

        def __init__(self, model: ChecklistModel, key: str | None = None) -> None:
            self.model = model
            self.key = key
            super().__init__()

    # -- constructor -----------------------------------------------------------

    def __init__(
        self,
        model: ChecklistModel | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        if model is not None:
            self.set_reactive(ChecklistWidget.model, model)

    # -- lifecycle -------------------------------------------------------------

    def on_mount(self) -> None:
        self._run_command(self.model.init())

    # -- input -----------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        # Every key belongs to the model.
        event.stop()
        event.prevent_default()
        self.feed(KeyPress(normalize_key(event.key)))

    def action_feed_key(self, key: str) -> None:
        self.feed(KeyPress(key))

    def feed(self, msg: object) -> None:
        """Run one update cycle for *msg*."""
        model, command = self.model.update(msg)
        if model != self.model:
            self.model = model
            key = msg.key if isinstance(msg, KeyPress) else None
            self.post_message(self.Changed(model, key))
        self._run_command(command)

    def _run_command(self, command: Command | None) -> None:
        if command is Command.QUIT:
            logger.info("Quit requested")
            self.app.exit()

    # -- render ----------------------------------------------------------------

    def render(self) -> Text:
        """Convert the model's ANSI view into a Rich ``Text``."""
        return Text.from_ansi(self.model.view())


__all__ = ["ChecklistWidget", "normalize_key"]
