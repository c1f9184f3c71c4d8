"""CLI command for printing the git context report."""

from pathlib import Path

import typer

from commitgate.constants import ContextExit
from commitgate.git.context import collect_context, render_error, render_report
from commitgate.git.exceptions import GitError, NoChangesError, NotARepositoryError
from commitgate.user_config import ConfigError, load_config


def context_command(
    staged_only: bool = typer.Option(
        False,
        "--staged-only",
        help="Only report changes already in the index",
    ),
) -> None:
    """Print changed files, diff and commitlint config for message generation."""
    root = Path.cwd()

    try:
        config = load_config(root)
        report = collect_context(staged_only=staged_only, root=root, config=config)
    except NotARepositoryError as e:
        typer.echo(render_error(str(e)))
        raise typer.Exit(ContextExit.NOT_A_REPOSITORY)
    except NoChangesError as e:
        typer.echo(render_error(str(e)))
        raise typer.Exit(ContextExit.NO_CHANGES)
    except (ConfigError, GitError) as e:
        # Other precondition failures share the repository exit code
        typer.echo(render_error(str(e)))
        raise typer.Exit(ContextExit.NOT_A_REPOSITORY)

    typer.echo(render_report(report))
