"""Reusable Textual widgets for checklist."""

from checklist.ui.widgets.checklist import ChecklistWidget

__all__ = ["ChecklistWidget"]
