"""Rich-based console output utilities.

Used only outside the TUI: before the app starts and after it exits.
"""

from rich.console import Console
from rich.theme import Theme

from checklist import SCRIPT_NAME, __version__

custom_theme = Theme(
    {
        "name": "bold",
        "version": "cyan",
    }
)

# Global console instance
console = Console(theme=custom_theme)


def print_error(message: str) -> None:
    """Print a single unstyled error line to standard output."""
    from checklist.utils.logging import log_message

    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)
    log_message(f"ERROR: {message}")


def show_version() -> None:
    """Display version information."""
    console.print(f"[name]{SCRIPT_NAME}[/name] [version]v{__version__}[/version]")


__all__ = [
    "console",
    "custom_theme",
    "print_error",
    "show_version",
]
