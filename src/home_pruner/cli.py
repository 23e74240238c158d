"""Command line interface for home-pruner."""

import sys
from importlib import metadata
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.traceback import Traceback

from home_pruner.git import ErrorCode, GitError, GitRepo
from home_pruner.logging_config import APP_NAME, get_logger, setup_logging
from home_pruner.preferences import PreferenceStore
from home_pruner.session import Session
from home_pruner.terminal import TerminalController

app = typer.Typer(
    help="Review and delete local git branches in an interactive terminal session.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)
err_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


def get_version() -> str:
    """Get the installed version string."""
    try:
        return f"v{metadata.version(APP_NAME)}"
    except metadata.PackageNotFoundError:
        return "Unknown version"


def stdin_is_terminal() -> bool:
    return sys.stdin.isatty()


def version_callback(value: bool) -> None:
    if value:
        print(get_version())
        raise typer.Exit()


def report_error(err: BaseException, debug: bool = False) -> None:
    """Print a user-facing error, plus diagnostics when debugging."""
    error = err if isinstance(err, GitError) else GitError("Something went wrong.", ErrorCode.UNKNOWN, err)
    err_console.print(f"[!Error]{APP_NAME}: {error}", markup=False, soft_wrap=True)

    if not debug:
        return
    err_console.print("---- debug ----", markup=False)
    err_console.print(f"code: {error.code.value}", markup=False)
    if error.cause is not None:
        err_console.print(f"cause: {error.cause!r}", markup=False, soft_wrap=True)
    if not isinstance(err, GitError):
        err_console.print(Traceback.from_exception(type(err), err, err.__traceback__))
    err_console.print("--------------", markup=False)


@app.command()
def main(
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    debug: Annotated[bool, typer.Option("--debug", help="Log to a file and show details on errors")] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """Interactively review and delete local branches.

    Keys: up/i and down/k move, Enter arms then deletes, f force deletes an
    armed branch, t toggles the banner, q or Ctrl-C quits.
    """
    setup_logging(debug=debug)

    try:
        repo = GitRepo(path)
    except GitError as err:
        report_error(err, debug)
        raise typer.Exit(code=1) from err

    if not stdin_is_terminal():
        err_console.print(f"[!Error]{APP_NAME}: An interactive terminal is required.", markup=False)
        raise typer.Exit(code=1)

    try:
        session = Session(repo, PreferenceStore())
        terminal = TerminalController.for_stdio()
        session.run(terminal)
    except Exception as err:
        logger.debug("Session ended with an error", exc_info=True)
        report_error(err, debug)
        raise typer.Exit(code=1) from err


if __name__ == "__main__":
    app()
