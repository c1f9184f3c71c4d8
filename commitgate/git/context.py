"""Git context report builder.

Contains:
- collect_context: Gather diff, changed files and commitlint config into a DiffReport
- find_lint_config: Locate the first conventional commitlint config file
- render_report: Format a DiffReport as the sectioned text report
- render_error: Format a reporter error as a one-line JSON object
"""

import json
from pathlib import Path
from typing import Optional

from commitgate.git.diff import get_combined_diff, get_staged_diff
from commitgate.git.exceptions import NoChangesError
from commitgate.git.runner import ensure_git_repo
from commitgate.git.status import (
    get_staged_name_status,
    get_status,
    parse_name_status,
    parse_porcelain_status,
)
from commitgate.models import DiffReport
from commitgate.user_config import ProjectConfig


def find_lint_config(root: Path, candidates: list[str]) -> Optional[Path]:
    """Find the first existing commitlint config file.

    Args:
        root: Directory to look in.
        candidates: Filenames in priority order.

    Returns:
        Path of the first match, or None.
    """
    for name in candidates:
        path = root / name
        if path.is_file():
            return path
    return None


def collect_context(
    staged_only: bool = False,
    root: Optional[Path] = None,
    config: Optional[ProjectConfig] = None,
) -> DiffReport:
    """Collect the repository state used for commit message generation.

    In staged-only mode both the diff and the file list come from the index.
    Otherwise the diff is the staged diff followed by the working tree diff,
    and the file list is the full porcelain status, so untracked files show
    up even though they have no diff.

    Args:
        staged_only: Limit the report to changes already in the index.
        root: Invocation root (defaults to the current directory).
        config: Project configuration (defaults to built-in values).

    Returns:
        The collected DiffReport.

    Raises:
        NotARepositoryError: If root is not inside a git repository.
        NoChangesError: If there is neither a diff nor a changed file.
    """
    root = root or Path.cwd()
    config = config or ProjectConfig()

    ensure_git_repo(cwd=root)

    if staged_only:
        diff_text = get_staged_diff(cwd=root)
        files_changed = parse_name_status(get_staged_name_status(cwd=root))
    else:
        diff_text = get_combined_diff(cwd=root)
        files_changed = parse_porcelain_status(get_status(cwd=root))

    if not diff_text and not files_changed:
        raise NoChangesError("no changes detected")

    lint_config_file = None
    lint_config_text = None
    lint_config = find_lint_config(root, config.commitlint_config_files)
    if lint_config is not None:
        lint_config_file = lint_config.name
        lint_config_text = lint_config.read_text(encoding="utf-8", errors="replace")

    return DiffReport(
        staged_only=staged_only,
        files_changed=files_changed,
        diff_text=diff_text,
        lint_config_file=lint_config_file,
        lint_config_text=lint_config_text,
        large_diff_threshold=config.large_diff_threshold,
    )


def render_report(report: DiffReport) -> str:
    """Render a DiffReport as plain text with stable section headers.

    Args:
        report: The collected report.

    Returns:
        The report text, without a trailing newline.
    """
    files = "\n".join(change.render() for change in report.files_changed)

    lines = [
        "=== GIT CONTEXT ===",
        "",
        "--- FILES CHANGED ---",
        files,
        "",
        f"--- DIFF ({report.line_count} lines) ---",
        report.diff_text,
    ]

    if report.lint_config_text:
        lines += [
            "",
            f"--- COMMITLINT CONFIG ({report.lint_config_file}) ---",
            report.lint_config_text.rstrip("\n"),
        ]

    if report.is_large:
        lines += ["", f"⚠️ WARNING: Large changeset ({report.line_count} lines)"]

    return "\n".join(lines)


def render_error(message: str) -> str:
    """Render a reporter failure as a JSON object."""
    return json.dumps({"error": message})
