"""Pre-commit quality gates.

Contains:
- detect_package_manager: Pick the package manager from lockfiles
- select_gates: The gate scripts to consider for a run
- run_gate: Run a single manifest script through the package manager
- run_gates: Run every declared gate in order, stopping at the first failure
"""

import subprocess
from pathlib import Path
from typing import Optional

import typer

from commitgate.constants import (
    DEFAULT_PACKAGE_MANAGER,
    GATE_SCRIPTS,
    LOCKFILE_PRIORITY,
    TEST_GATE,
    GateScript,
    PackageManager,
)
from commitgate.git.status import stage_all
from commitgate.manifest import get_manifest_path, load_manifest
from commitgate.models import GateOutcome, GateReport
from commitgate.user_config import ProjectConfig


def detect_package_manager(root: Path) -> PackageManager:
    """Detect which package manager the project uses.

    Lockfiles are probed in priority order. A manifest without any lockfile
    falls back to npm.

    Args:
        root: The project root directory.

    Returns:
        The detected package manager, or PackageManager.NONE.
    """
    for lockfile, manager in LOCKFILE_PRIORITY:
        if (root / lockfile).is_file():
            return manager
    if get_manifest_path(root).is_file():
        return DEFAULT_PACKAGE_MANAGER
    return PackageManager.NONE


def select_gates(skip_tests: bool = False) -> list[GateScript]:
    """Return the gate scripts to run, in order."""
    if skip_tests:
        return [gate for gate in GATE_SCRIPTS if gate != TEST_GATE]
    return list(GATE_SCRIPTS)


def run_gate(
    manager: PackageManager,
    gate: GateScript,
    root: Path,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """Run one gate script with the terminal attached.

    Args:
        manager: Package manager used to run the script.
        gate: The gate to run.
        root: Directory to run in.
        timeout: Seconds to wait before giving up, None to wait forever.

    Returns:
        None on success, otherwise a short reason for the failure.
    """
    try:
        result = subprocess.run(
            [manager.value, "run", gate.name],
            cwd=root,
            timeout=timeout,
        )
    except FileNotFoundError:
        return f"{manager.value} not found in PATH"
    except subprocess.TimeoutExpired:
        return f"timed out after {timeout:g}s"

    if result.returncode != 0:
        return f"exited with status {result.returncode}"
    return None


def run_gates(
    root: Optional[Path] = None,
    skip_tests: bool = False,
    config: Optional[ProjectConfig] = None,
) -> GateReport:
    """Run the project's quality gates.

    Scripts missing from the manifest are skipped. The first failing script
    stops the run. Files touched by a successful restaging script (format,
    lint) are added back to the index before the next script starts.

    Args:
        root: The project root (defaults to the current directory).
        skip_tests: Never probe or run the test script.
        config: Project configuration (defaults to built-in values).

    Returns:
        A GateReport. NEUTRAL means there was nothing to check.

    Raises:
        ManifestError: If package.json exists but cannot be parsed.
        GitError: If re-staging fails.
    """
    root = root or Path.cwd()
    config = config or ProjectConfig()

    if not get_manifest_path(root).is_file():
        typer.echo("ℹ️ No package.json found, skipping pre-commit checks")
        return GateReport(outcome=GateOutcome.NEUTRAL, reason="no package.json")

    manager = detect_package_manager(root)
    if manager is PackageManager.NONE:
        typer.echo("ℹ️ No package manager detected")
        return GateReport(outcome=GateOutcome.NEUTRAL, reason="no package manager")

    manifest = load_manifest(root)
    report = GateReport(outcome=GateOutcome.SUCCESS, package_manager=manager)

    typer.echo(f"🔍 Running pre-commit checks with {manager.value}...")

    for gate in select_gates(skip_tests):
        if not manifest.has_script(gate.name):
            report.skipped.append(gate)
            continue

        typer.echo(f"🔄 Running {gate.display_name}...")
        failure = run_gate(manager, gate, root, timeout=config.gate_timeout)
        if failure:
            typer.echo(f"❌ {gate.display_name} failed ({failure})")
            report.outcome = GateOutcome.FAILED
            report.failed_gate = gate
            report.reason = failure
            return report

        if gate.restage:
            stage_all(cwd=root)
        report.passed.append(gate)
        typer.echo(f"✅ {gate.display_name} passed")

    typer.echo("✅ All pre-commit checks passed")
    return report
