"""Shared pytest fixtures for checklist tests."""

import re
from collections.abc import Callable

import pytest

from checklist.model import ChecklistModel, Command, KeyPress, initial_model

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def model() -> ChecklistModel:
    """The startup model: cursor on row 0, nothing selected."""
    return initial_model()


@pytest.fixture
def press() -> Callable[..., tuple[ChecklistModel, Command | None]]:
    """Feed a sequence of key names through ``update``.

    Returns the final model and the command from the last update.
    """

    def _press(model: ChecklistModel, *keys: str) -> tuple[ChecklistModel, Command | None]:
        command = None
        for key in keys:
            model, command = model.update(KeyPress(key))
        return model, command

    return _press


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove SGR escape sequences from rendered output."""

    def _strip(text: str) -> str:
        return ANSI_ESCAPE.sub("", text)

    return _strip
