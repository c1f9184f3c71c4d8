"""Project manifest (package.json) parsing.

Contains:
- ManifestError: Raised when the manifest cannot be read or parsed
- Manifest: Typed view of the manifest's scripts table
- load_manifest: Parse the manifest at a project root
"""

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from commitgate.constants import MANIFEST_FILE


class ManifestError(Exception):
    """Raised when the project manifest is unreadable or malformed."""

    pass


class Manifest(BaseModel):
    """The parts of package.json the gate runner cares about."""

    scripts: dict[str, str] = {}

    @field_validator("scripts", mode="before")
    @classmethod
    def scripts_default_when_null(cls, v):
        """Treat a null scripts table as empty."""
        return v or {}

    def has_script(self, name: str) -> bool:
        """Check whether a script is declared with a non-empty command.

        Args:
            name: Script name to look up (e.g. "lint").

        Returns:
            True if the script can be run.
        """
        return bool(self.scripts.get(name, "").strip())


def get_manifest_path(root: Path) -> Path:
    """Return the manifest path for a project root."""
    return root / MANIFEST_FILE


def load_manifest(root: Path) -> Manifest:
    """Load and validate package.json from the project root.

    Args:
        root: Directory containing package.json.

    Returns:
        The parsed manifest.

    Raises:
        ManifestError: If the file is missing, not valid JSON, or has an invalid scripts table.
    """
    manifest_path = get_manifest_path(root)

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestError(f"Failed to read {manifest_path}: {e}")
    except json.JSONDecodeError as e:
        raise ManifestError(f"{manifest_path} is not valid JSON: {e}")

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} must contain a JSON object")

    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid scripts table in {manifest_path}: {e}")
