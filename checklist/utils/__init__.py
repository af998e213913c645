"""Utility modules for checklist."""

from checklist.utils.console import (
    console,
    print_error,
    show_version,
)
from checklist.utils.errors import ChecklistError, ExitCode, RuntimeFailedError
from checklist.utils.logging import get_logger, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "show_version",
    # Errors
    "ExitCode",
    "ChecklistError",
    "RuntimeFailedError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_message",
]
