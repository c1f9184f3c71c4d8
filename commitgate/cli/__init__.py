"""CLI entry point for commitgate.

Combines the three pipeline stages into one app and exposes each stage
as its own console script.
"""

import typer

from commitgate.cli.check import check_command
from commitgate.cli.commit import commit_command
from commitgate.cli.context import context_command
from commitgate.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitgate",
    help="commitgate: pre-commit gates, git context and guarded commits",
    add_completion=False,
)

app.command("check")(check_command)
app.command("context")(context_command)
app.command("commit")(commit_command)

app.callback()(main_command)


def check_main() -> None:
    """Entry point for commitgate-check."""
    typer.run(check_command)


def context_main() -> None:
    """Entry point for commitgate-context."""
    typer.run(context_command)


def commit_main() -> None:
    """Entry point for commitgate-commit."""
    typer.run(commit_command)


__all__ = [
    "app",
    "check_command",
    "context_command",
    "commit_command",
    "main_command",
    "check_main",
    "context_main",
    "commit_main",
]
