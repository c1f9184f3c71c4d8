"""Shared test fixtures and configuration."""

import json
import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest


def run_git(repo: Path, *args: str) -> str:
    """Run git in repo and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment from leaking into config loading."""
    monkeypatch.delenv("COMMITGATE_GATE_TIMEOUT", raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def no_repo_dir(temp_dir, monkeypatch):
    """A working directory that git will not treat as part of any repository."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(temp_dir.parent))
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def git_repo(no_repo_dir):
    """Create an empty git repository and chdir into it."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    run_git(no_repo_dir, "init", "-q")
    run_git(no_repo_dir, "config", "user.email", "dev@example.com")
    run_git(no_repo_dir, "config", "user.name", "Dev")
    run_git(no_repo_dir, "config", "commit.gpgsign", "false")
    run_git(no_repo_dir, "config", "core.hooksPath", str(no_repo_dir / ".git" / "hooks"))
    return no_repo_dir


@pytest.fixture
def write_manifest():
    """Return a helper writing package.json with the given scripts."""

    def _write(root: Path, scripts=None) -> Path:
        path = root / "package.json"
        data = {"name": "demo", "version": "1.0.0"}
        if scripts is not None:
            data["scripts"] = scripts
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def sample_name_status():
    """Sample `git diff --cached --name-status` output."""
    return "A\tnew_file.py\nM\texisting_file.py\nR087\told_name.py\tnew_name.py"


@pytest.fixture
def sample_porcelain_status():
    """Sample `git status --porcelain` output."""
    return " M unstaged.py\nA  staged.py\n?? untracked.py\nR  old.py -> new.py"


@pytest.fixture
def sample_diff():
    """Sample unified diff."""
    return """diff --git a/new_file.py b/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,2 @@
+def hello():
+    print("Hello, world!")"""


@pytest.fixture
def git():
    """Return a helper running git commands in a given repository."""
    return run_git
