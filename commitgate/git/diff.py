"""Git diff utilities.

Contains:
- get_staged_diff: Diff of the index against HEAD
- get_working_diff: Diff of the working tree against the index
- get_combined_diff: Staged diff followed by the working tree diff

Deleted files are left out of every diff (--diff-filter=d) and all
content is treated as text.
"""

from pathlib import Path
from typing import Optional

from commitgate.git.runner import _run_git_command


DIFF_ARGS = ["--diff-filter=d", "--text"]


def get_staged_diff(cwd: Optional[Path] = None) -> str:
    """Get the diff of staged changes.

    Returns:
        The staged diff, empty if nothing is staged.
    """
    return _run_git_command(["diff", "--cached"] + DIFF_ARGS, cwd=cwd, strip=False)


def get_working_diff(cwd: Optional[Path] = None) -> str:
    """Get the diff of unstaged working tree changes.

    Returns:
        The working tree diff, empty if the tree matches the index.
    """
    return _run_git_command(["diff"] + DIFF_ARGS, cwd=cwd, strip=False)


def get_combined_diff(cwd: Optional[Path] = None) -> str:
    """Get staged and unstaged changes as one diff, staged hunks first.

    Returns:
        The concatenated diff.
    """
    staged = get_staged_diff(cwd=cwd)
    working = get_working_diff(cwd=cwd)
    if staged and working:
        return f"{staged}\n{working}"
    return staged or working
