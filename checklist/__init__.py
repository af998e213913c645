"""Market checklist - a small Textual demo for picking groceries.

This package provides a single-screen terminal checklist driven by a
Model/Update/View loop and styled with Rich.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "checklist"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
