"""Custom exceptions and exit codes for checklist.

The model layer never raises; everything here describes failures of the
Textual runtime that hosts it.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes reported by the CLI."""

    SUCCESS = 0
    GENERAL_ERROR = 1


class ChecklistError(Exception):
    """Base exception for checklist errors.

    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class RuntimeFailedError(ChecklistError):
    """The Textual event loop failed to start or stopped abnormally.

    Raised when:
    - ``App.run()`` raises (e.g. no usable terminal)
    - The app finishes with a non-zero return code
    """

    def __init__(
        self,
        message: str,
        return_code: int | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        super().__init__(message, exit_code)
        self.return_code = return_code


__all__ = [
    "ExitCode",
    "ChecklistError",
    "RuntimeFailedError",
]
