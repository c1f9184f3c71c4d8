"""Git status and index utilities.

Contains:
- get_status: Full working tree status in porcelain format
- get_staged_name_status: Name and status of staged changes
- get_staged_files_list: List of staged file paths
- parse_porcelain_status / parse_name_status: Turn either listing into FileChange entries
- stage_all: Add every working tree change to the index
"""

from pathlib import Path
from typing import Optional

from commitgate.git.runner import _run_git_command
from commitgate.models import FileChange


def get_status(cwd: Optional[Path] = None) -> str:
    """Get git status output in porcelain format.

    Covers staged, unstaged and untracked paths.

    Returns:
        The git status output.
    """
    return _run_git_command(["status", "--porcelain"], cwd=cwd, strip=False)


def get_staged_name_status(cwd: Optional[Path] = None) -> str:
    """Get the name-status listing of staged changes.

    Returns:
        Lines like "A\\tpath" or "R100\\told\\tnew".
    """
    return _run_git_command(["diff", "--cached", "--name-status"], cwd=cwd)


def get_staged_files_list(cwd: Optional[Path] = None) -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(["diff", "--cached", "--name-only"], cwd=cwd)
    if not output:
        return []
    return output.split("\n")


def parse_name_status(output: str) -> list[FileChange]:
    """Parse `git diff --name-status` output.

    Args:
        output: Raw name-status listing.

    Returns:
        One FileChange per line, in git's order.
    """
    changes = []
    for line in output.split("\n"):
        if not line.strip():
            continue
        parts = line.split("\t")
        status = parts[0]
        if len(parts) >= 3:
            # Renames and copies: "R100\told\tnew"
            changes.append(FileChange(status=status, path=parts[2], original_path=parts[1]))
        elif len(parts) == 2:
            changes.append(FileChange(status=status, path=parts[1]))
    return changes


def parse_porcelain_status(output: str) -> list[FileChange]:
    """Parse `git status --porcelain` output.

    The first two columns hold the index and worktree status, the path
    starts at column four.

    Args:
        output: Raw porcelain listing.

    Returns:
        One FileChange per line, in git's order.
    """
    changes = []
    for line in output.split("\n"):
        if len(line) < 4:
            continue
        status = line[:2]
        filename = line[3:]

        # Handle renames: "R  old -> new"
        if " -> " in filename:
            old_name, new_name = filename.split(" -> ", 1)
            changes.append(FileChange(status=status, path=new_name, original_path=old_name))
            continue

        changes.append(FileChange(status=status, path=filename))
    return changes


def stage_all(cwd: Optional[Path] = None) -> None:
    """Add all working tree modifications to the index (`git add .`).

    Raises:
        GitError: If git refuses to stage.
    """
    _run_git_command(["add", "."], cwd=cwd)
