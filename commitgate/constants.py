"""Constants for the commitgate pipeline.

Contains:
- PackageManager: Supported JavaScript package managers
- CheckExit, ContextExit, CommitExit: Exit codes of the three CLI entry points
- GateScript / GATE_SCRIPTS: Quality gate scripts in execution order
- LOCKFILE_PRIORITY: Lockfile to package manager mapping, in probe order
- COMMITLINT_CONFIG_FILES: Conventional commitlint config filenames
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class PackageManager(Enum):
    """Package managers that can run manifest scripts."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
    NONE = "none"


class CheckExit(IntEnum):
    """Exit codes of the gate runner."""

    SUCCESS = 0
    MANIFEST_ERROR = 1
    GATE_FAILED = 3


class ContextExit(IntEnum):
    """Exit codes of the context reporter."""

    SUCCESS = 0
    NOT_A_REPOSITORY = 1
    NO_CHANGES = 2


class CommitExit(IntEnum):
    """Exit codes of the committer."""

    SUCCESS = 0
    NO_MESSAGE = 1
    NOTHING_STAGED = 2
    COMMIT_FAILED = 5


@dataclass(frozen=True)
class GateScript:
    """A quality check looked up by name in the manifest's scripts table."""

    name: str
    display_name: str
    restage: bool = False


MANIFEST_FILE = "package.json"

# Probed top to bottom, first match wins
LOCKFILE_PRIORITY = [
    ("package-lock.json", PackageManager.NPM),
    ("yarn.lock", PackageManager.YARN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
]

# Used when a manifest exists but no lockfile does
DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

TEST_GATE = GateScript("test", "tests")

GATE_SCRIPTS = [
    GateScript("format", "format", restage=True),
    GateScript("typecheck", "typecheck"),
    GateScript("lint", "lint", restage=True),
    TEST_GATE,
]

COMMITLINT_CONFIG_FILES = [
    "commitlint.config.ts",
    "commitlint.config.js",
    "commitlint.config.json",
    ".commitlintrc.ts",
    ".commitlintrc.js",
    ".commitlintrc.json",
]

LARGE_DIFF_THRESHOLD = 1000
