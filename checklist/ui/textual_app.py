"""Root Textual application for checklist."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult

from checklist.model import ChecklistModel
from checklist.ui.widgets.checklist import ChecklistWidget

logger = logging.getLogger(__name__)


class ChecklistApp(App[None], inherit_bindings=False):
    """Single-screen checklist.

    Framework bindings are not inherited so that every key, ``ctrl+c``
    included, reaches the checklist model.
    """

    TITLE = "checklist"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        padding: 0;
    }
    """

    def __init__(self, model: ChecklistModel | None = None) -> None:
        super().__init__()
        self._initial_model = model

    def compose(self) -> ComposeResult:
        yield ChecklistWidget(self._initial_model, id="checklist")

    def on_mount(self) -> None:
        self.query_one("#checklist", ChecklistWidget).focus()

    def on_checklist_widget_changed(self, event: ChecklistWidget.Changed) -> None:
        model = event.model
        logger.info(
            "key=%r cursor=%d selected=%s",
            event.key,
            model.cursor,
            [model.items[i] for i in sorted(model.selected)],
        )


__all__ = ["ChecklistApp"]
