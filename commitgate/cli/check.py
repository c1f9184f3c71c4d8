"""CLI command for running the pre-commit quality gates."""

from pathlib import Path

import typer

from commitgate.constants import CheckExit
from commitgate.gates import run_gates
from commitgate.git.exceptions import GitError
from commitgate.manifest import ManifestError
from commitgate.user_config import ConfigError, load_config


def check_command(
    skip_tests: bool = typer.Option(
        False,
        "--skip-tests",
        help="Do not run the test script",
    ),
) -> None:
    """Run format, typecheck, lint and test scripts from package.json.

    Files rewritten by format and lint are re-staged. Stops at the first
    failing script.
    """
    root = Path.cwd()

    try:
        config = load_config(root)
        report = run_gates(root, skip_tests=skip_tests, config=config)
    except (ConfigError, ManifestError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(CheckExit.MANIFEST_ERROR)
    except GitError as e:
        typer.echo(f"❌ Re-staging failed: {e}", err=True)
        raise typer.Exit(CheckExit.GATE_FAILED)

    if not report.ok:
        raise typer.Exit(CheckExit.GATE_FAILED)
