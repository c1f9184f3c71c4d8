"""Top-level callback for the commitgate app."""

from typing import Optional

import typer

from commitgate import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitgate {__version__}")
        raise typer.Exit()


def main_command(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """commitgate: pre-commit gates, git context and guarded commits.

    Run the stages in order: check, context, commit.
    """
