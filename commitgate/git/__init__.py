"""Git operations for commitgate.

This package provides:
- exceptions: GitError and the precondition errors of each stage
- runner: _run_git_command, ensure_git_repo
- status: get_status, get_staged_name_status, get_staged_files_list, stage_all
- diff: get_staged_diff, get_working_diff, get_combined_diff
- context: collect_context, render_report, render_error
- commit: create_commit
"""

# Exceptions
from commitgate.git.exceptions import (
    GitError,
    NotARepositoryError,
    NoChangesError,
    NothingStagedError,
    CommitFailedError,
    MissingMessageError,
)

# Runner utilities
from commitgate.git.runner import (
    _run_git_command,
    ensure_git_repo,
)

# Status and index utilities
from commitgate.git.status import (
    get_status,
    get_staged_name_status,
    get_staged_files_list,
    parse_name_status,
    parse_porcelain_status,
    stage_all,
)

# Diff utilities
from commitgate.git.diff import (
    get_staged_diff,
    get_working_diff,
    get_combined_diff,
)

# Context report
from commitgate.git.context import (
    collect_context,
    find_lint_config,
    render_report,
    render_error,
)

# Commit
from commitgate.git.commit import create_commit


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "NoChangesError",
    "NothingStagedError",
    "CommitFailedError",
    "MissingMessageError",
    # Runner
    "_run_git_command",
    "ensure_git_repo",
    # Status
    "get_status",
    "get_staged_name_status",
    "get_staged_files_list",
    "parse_name_status",
    "parse_porcelain_status",
    "stage_all",
    # Diff
    "get_staged_diff",
    "get_working_diff",
    "get_combined_diff",
    # Context
    "collect_context",
    "find_lint_config",
    "render_report",
    "render_error",
    # Commit
    "create_commit",
]
