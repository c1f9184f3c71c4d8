"""CLI command for committing with a provided message."""

import typer

from commitgate.constants import CommitExit
from commitgate.git.commit import create_commit
from commitgate.git.exceptions import (
    CommitFailedError,
    GitError,
    MissingMessageError,
    NothingStagedError,
)


def commit_command(
    message: str = typer.Argument(
        "",
        help="Commit message, used verbatim",
        show_default=False,
    ),
) -> None:
    """Commit the staged changes with MESSAGE."""
    try:
        create_commit(message)
    except MissingMessageError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(CommitExit.NO_MESSAGE)
    except NothingStagedError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(CommitExit.NOTHING_STAGED)
    except CommitFailedError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(CommitExit.COMMIT_FAILED)
    except GitError as e:
        # The index could not be read, so nothing can be staged
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(CommitExit.NOTHING_STAGED)

    typer.echo("✅ Commit created successfully!")
