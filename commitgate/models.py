"""Data models for the commitgate pipeline.

Contains:
- FileChange: A single changed path with its git status code
- DiffReport: Repository state collected for commit message generation
- GateOutcome / GateReport: Result of a gate runner invocation
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from commitgate.constants import LARGE_DIFF_THRESHOLD, GateScript, PackageManager


class FileChange(BaseModel):
    """A changed file as reported by git.

    Attributes:
        status: Status code from name-status ("A", "M", "R100") or porcelain ("??", " M").
        path: Current path of the file.
        original_path: Source path for renames and copies.
    """

    status: str
    path: str
    original_path: Optional[str] = None

    def render(self) -> str:
        """Render the change as a single status line."""
        if self.original_path:
            return f"{self.status}\t{self.original_path} -> {self.path}"
        return f"{self.status}\t{self.path}"


class DiffReport(BaseModel):
    """Git state handed to the commit message generator."""

    staged_only: bool
    files_changed: list[FileChange] = []
    diff_text: str = ""
    lint_config_file: Optional[str] = None
    lint_config_text: Optional[str] = None
    large_diff_threshold: int = LARGE_DIFF_THRESHOLD

    @property
    def line_count(self) -> int:
        """Number of lines in the diff body."""
        return len(self.diff_text.splitlines())

    @property
    def is_large(self) -> bool:
        """True when the diff is over the advisory size threshold."""
        return self.line_count > self.large_diff_threshold


class GateOutcome(Enum):
    """Overall result of a gate runner invocation."""

    SUCCESS = "success"
    NEUTRAL = "neutral"
    FAILED = "failed"


@dataclass
class GateReport:
    """What the gate runner did and how it ended."""

    outcome: GateOutcome
    package_manager: PackageManager = PackageManager.NONE
    passed: list[GateScript] = field(default_factory=list)
    skipped: list[GateScript] = field(default_factory=list)
    failed_gate: Optional[GateScript] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is not GateOutcome.FAILED
