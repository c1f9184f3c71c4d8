"""Guarded git commit.

Contains:
- create_commit: Validate preconditions and run `git commit`
"""

import subprocess
from pathlib import Path
from typing import Optional

import typer

from commitgate.git.exceptions import (
    CommitFailedError,
    MissingMessageError,
    NothingStagedError,
)
from commitgate.git.status import get_staged_files_list


def create_commit(message: str, root: Optional[Path] = None) -> None:
    """Commit the staged changes with the given message.

    The message is passed to git verbatim. Output of git and of any commit
    hooks goes straight to the terminal.

    Args:
        message: The commit message.
        root: Directory to commit in (defaults to the current directory).

    Raises:
        MissingMessageError: If the message is empty. Git is not touched.
        NothingStagedError: If the index holds no changes.
        CommitFailedError: If git rejected the commit (hooks, config, missing git).
    """
    if not message or not message.strip():
        raise MissingMessageError("no commit message provided")

    if not get_staged_files_list(cwd=root):
        raise NothingStagedError("no staged changes to commit")

    typer.echo("📝 Creating commit...")
    typer.echo("-" * 40)
    typer.echo(message)
    typer.echo("-" * 40)

    try:
        result = subprocess.run(["git", "commit", "-m", message], cwd=root)
    except FileNotFoundError:
        raise CommitFailedError("Git is not installed or not in PATH.", returncode=127)

    if result.returncode != 0:
        raise CommitFailedError("git commit failed", returncode=result.returncode)
