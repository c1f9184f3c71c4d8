"""Per-project configuration for commitgate.

Reads the optional .commitgate/config.yaml file at the project root.
The file is never created implicitly: the gate runner re-stages the whole
working tree, so a generated file would end up in the user's commit.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from commitgate.constants import COMMITLINT_CONFIG_FILES, LARGE_DIFF_THRESHOLD


CONFIG_DIR_NAME = ".commitgate"
CONFIG_FILE_NAME = "config.yaml"

# Environment variable overriding gate_timeout (seconds)
GATE_TIMEOUT_ENV = "COMMITGATE_GATE_TIMEOUT"


class ConfigError(Exception):
    """Raised when the project configuration is invalid."""

    pass


class ProjectConfig(BaseModel):
    """Settings shared by the gate runner and the context reporter."""

    large_diff_threshold: int = LARGE_DIFF_THRESHOLD
    gate_timeout: Optional[float] = None  # None waits forever
    commitlint_config_files: list[str] = list(COMMITLINT_CONFIG_FILES)

    @field_validator("large_diff_threshold")
    @classmethod
    def threshold_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("large_diff_threshold must be positive")
        return v

    @field_validator("gate_timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("gate_timeout must be positive")
        return v


def get_config_file(root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        root: The project root directory.

    Returns:
        Path to .commitgate/config.yaml.
    """
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(root: Path) -> ProjectConfig:
    """Load the project configuration, falling back to defaults.

    Values from the environment take precedence over the config file.

    Args:
        root: The project root directory.

    Returns:
        Validated project configuration.

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values.
    """
    config_file = get_config_file(root)
    data = {}

    if config_file.exists():
        try:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {config_file}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping")

    try:
        config = ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}")

    env_timeout = os.environ.get(GATE_TIMEOUT_ENV)
    if env_timeout:
        try:
            config = ProjectConfig.model_validate({**data, "gate_timeout": env_timeout})
        except ValidationError as e:
            raise ConfigError(f"Invalid {GATE_TIMEOUT_ENV}={env_timeout!r}: {e}")

    return config
