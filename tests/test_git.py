"""Tests for commitgate.git runner, status and diff helpers."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitgate.git import (
    GitError,
    NotARepositoryError,
    _run_git_command,
    ensure_git_repo,
    get_combined_diff,
    get_staged_diff,
    get_staged_files_list,
    get_status,
    get_working_diff,
    parse_name_status,
    parse_porcelain_status,
    stage_all,
)


def _result(stdout: str) -> MagicMock:
    mock_result = MagicMock()
    mock_result.stdout = stdout
    mock_result.returncode = 0
    return mock_result


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mocker.patch("subprocess.run", return_value=_result("output\n"))

        result = _run_git_command(["status"])
        assert result == "output"

    def test_keeps_leading_whitespace_without_strip(self, mocker):
        """Test that strip=False only removes trailing newlines."""
        mocker.patch("subprocess.run", return_value=_result(" M file.py\n"))

        result = _run_git_command(["status", "--porcelain"], strip=False)
        assert result == " M file.py"

    def test_passes_cwd(self, mocker):
        """Test that cwd is forwarded to subprocess."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(""))

        _run_git_command(["status"], cwd=Path("/repo"))

        assert mock_run.call_args.kwargs["cwd"] == Path("/repo")
        assert mock_run.call_args.args[0] == ["git", "status"]

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="error")
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestRepositoryChecks:
    """Tests for ensure_git_repo."""

    def test_ensure_git_repo_passes(self, mocker):
        """Test that a repository passes the check."""
        mocker.patch("subprocess.run", return_value=_result(".git\n"))

        ensure_git_repo()

    def test_ensure_git_repo_raises(self, mocker):
        """Test error if not in a git repository."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repo")
        )

        with pytest.raises(NotARepositoryError) as exc_info:
            ensure_git_repo()

        assert "not a git repository" in str(exc_info.value)

    def test_not_a_repository_is_a_git_error(self, mocker):
        """Test that callers catching GitError also catch NotARepositoryError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(128, "git", stderr="")
        )

        with pytest.raises(GitError):
            ensure_git_repo()


class TestStatusCommands:
    """Tests for status and index listing commands."""

    def test_get_status_uses_porcelain(self, mocker):
        """Test that status output keeps its status columns."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(" M a.py\n?? b.py\n"))

        result = get_status()

        assert result == " M a.py\n?? b.py"
        assert mock_run.call_args.args[0] == ["git", "status", "--porcelain"]

    def test_staged_files_list(self, mocker):
        """Test listing staged files."""
        mocker.patch("subprocess.run", return_value=_result("a.py\nb.py\n"))

        assert get_staged_files_list() == ["a.py", "b.py"]

    def test_staged_files_list_empty(self, mocker):
        """Test that an empty index gives an empty list."""
        mocker.patch("subprocess.run", return_value=_result(""))

        assert get_staged_files_list() == []

    def test_stage_all_adds_everything(self, mocker):
        """Test that stage_all runs `git add .`."""
        mock_run = mocker.patch("subprocess.run", return_value=_result(""))

        stage_all(cwd=Path("/repo"))

        assert mock_run.call_args.args[0] == ["git", "add", "."]


class TestParseNameStatus:
    """Tests for parse_name_status function."""

    def test_parses_entries(self, sample_name_status):
        """Test added, modified and renamed entries."""
        changes = parse_name_status(sample_name_status)

        assert [c.status for c in changes] == ["A", "M", "R087"]
        assert changes[0].path == "new_file.py"
        assert changes[2].path == "new_name.py"
        assert changes[2].original_path == "old_name.py"

    def test_empty_output(self):
        """Test that empty output gives no changes."""
        assert parse_name_status("") == []

    def test_render(self, sample_name_status):
        """Test rendering of plain and renamed entries."""
        changes = parse_name_status(sample_name_status)

        assert changes[0].render() == "A\tnew_file.py"
        assert changes[2].render() == "R087\told_name.py -> new_name.py"


class TestParsePorcelainStatus:
    """Tests for parse_porcelain_status function."""

    def test_parses_all_states(self, sample_porcelain_status):
        """Test that unstaged, staged and untracked entries are all kept."""
        changes = parse_porcelain_status(sample_porcelain_status)

        assert [c.path for c in changes] == ["unstaged.py", "staged.py", "untracked.py", "new.py"]
        assert changes[0].status == " M"
        assert changes[2].status == "??"

    def test_rename(self, sample_porcelain_status):
        """Test rename arrow parsing."""
        changes = parse_porcelain_status(sample_porcelain_status)

        assert changes[3].original_path == "old.py"


class TestDiffCommands:
    """Tests for diff helpers."""

    def test_staged_diff_args(self, mocker):
        """Test that the staged diff skips deletions and forces text."""
        mock_run = mocker.patch("subprocess.run", return_value=_result("diff\n"))

        get_staged_diff()

        assert mock_run.call_args.args[0] == ["git", "diff", "--cached", "--diff-filter=d", "--text"]

    def test_staged_diff_keeps_trailing_whitespace(self, mocker):
        """Test that blank context lines and trailing spaces survive."""
        mocker.patch("subprocess.run", return_value=_result("+a = 10\n+trailing   \n \n"))

        assert get_staged_diff() == "+a = 10\n+trailing   \n "

    def test_working_diff_args(self, mocker):
        """Test the working tree diff command."""
        mock_run = mocker.patch("subprocess.run", return_value=_result("diff\n"))

        get_working_diff()

        assert mock_run.call_args.args[0] == ["git", "diff", "--diff-filter=d", "--text"]

    def test_combined_diff_puts_staged_first(self, mocker):
        """Test that staged hunks come before working tree hunks."""
        mocker.patch("commitgate.git.diff.get_staged_diff", return_value="STAGED")
        mocker.patch("commitgate.git.diff.get_working_diff", return_value="WORKING")

        assert get_combined_diff() == "STAGED\nWORKING"

    def test_combined_diff_without_staged(self, mocker):
        """Test that the working diff stands alone when nothing is staged."""
        mocker.patch("commitgate.git.diff.get_staged_diff", return_value="")
        mocker.patch("commitgate.git.diff.get_working_diff", return_value="WORKING")

        assert get_combined_diff() == "WORKING"

    def test_combined_diff_without_working(self, mocker):
        """Test that the staged diff stands alone on a clean working tree."""
        mocker.patch("commitgate.git.diff.get_staged_diff", return_value="STAGED")
        mocker.patch("commitgate.git.diff.get_working_diff", return_value="")

        assert get_combined_diff() == "STAGED"
