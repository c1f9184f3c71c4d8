"""Git command runner and repository check.

Contains:
- _run_git_command: Run a git command and return its output
- ensure_git_repo: Fail unless the directory is inside a git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitgate.git.exceptions import GitError, NotARepositoryError


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).
        strip: Strip surrounding whitespace. When False only trailing
            newlines are removed, which keeps porcelain status columns intact.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    if strip:
        return result.stdout.strip()
    return result.stdout.rstrip("\n")


def ensure_git_repo(cwd: Optional[Path] = None) -> None:
    """Check that cwd is inside a git repository.

    Raises:
        NotARepositoryError: If it is not (or git is unavailable).
    """
    try:
        _run_git_command(["rev-parse", "--git-dir"], cwd=cwd)
    except GitError:
        raise NotARepositoryError("not a git repository")

