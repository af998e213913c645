"""Typer application and main entry point for the CLI.

Contains the Typer app, main command, and version callback.
"""

from typing import Annotated

import typer

from checklist import SCRIPT_NAME
from checklist.model import ChecklistModel
from checklist.ui.textual_app import ChecklistApp
from checklist.utils.console import print_error, show_version
from checklist.utils.errors import ChecklistError, RuntimeFailedError
from checklist.utils.logging import log_message, setup_logging

ERROR_PREFIX = "Alas, there's been an error"

# Create Typer app
app = typer.Typer(
    name=SCRIPT_NAME,
    help="Pick what to buy at the market from a keyboard-driven checklist",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


def run_checklist(model: ChecklistModel | None = None) -> None:
    """Run the checklist app on the controlling terminal.

    Raises:
        RuntimeFailedError: If Textual fails to start or exits abnormally
    """
    checklist_app = ChecklistApp(model)
    try:
        checklist_app.run()
    except Exception as e:
        raise RuntimeFailedError(str(e) or type(e).__name__) from e

    # Textual prints its own traceback and keeps the exception in _exception.
    return_code = checklist_app.return_code or 0
    if return_code != 0:
        raise RuntimeFailedError(
            _describe_exit(return_code, getattr(checklist_app, "_exception", None)),
            return_code=return_code,
        )


def _describe_exit(return_code: int, error: object) -> str:
    """Summarise an abnormal exit, including the exception Textual caught."""
    message = f"application exited with status {return_code}"
    if isinstance(error, BaseException):
        detail = str(error).splitlines()[0] if str(error) else ""
        name = type(error).__name__
        message = f"{message} ({name}: {detail})" if detail else f"{message} ({name})"
    return message


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Navigate with up/down or j/k, toggle with enter or space, quit with q."""
    setup_logging()
    log_message("Starting checklist")

    try:
        run_checklist()
    except ChecklistError as e:
        print_error(f"{ERROR_PREFIX}: {e}")
        raise typer.Exit(e.exit_code) from e

    log_message("Checklist closed")


__all__ = ["app", "main", "run_checklist"]
