"""Configuration management for Bueller."""

from enum import Enum
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from bueller.exceptions import ConfigError

CONFIG_FILENAME = ".bueller.yaml"

DEFAULT_AUTHORS = ["user", "agent", "claude"]


class StatusDirs(BaseModel):
    """Directory names for each issue status under the issues root."""

    open: str = "open"
    review: str = "review"
    stuck: str = "stuck"


class Config(BaseModel):
    """Bueller configuration."""

    issues_dir: Path = Path("issues")
    status_dirs: StatusDirs = Field(default_factory=StatusDirs)
    authors: List[str] = Field(default_factory=lambda: list(DEFAULT_AUTHORS))
    long_limit: int = 300
    short_limit: int = 80

    @field_validator("long_limit", "short_limit")
    @classmethod
    def _limit_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Truncation limit must be positive, got {v}")
        return v

    @field_validator("authors")
    @classmethod
    def _authors_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("At least one author must be configured")
        return v

    def status_dir(self, status: str) -> str:
        """Get the directory name for a status.

        Args:
            status: Status value ("open", "review" or "stuck")

        Returns:
            Directory name configured for that status
        """
        key = status.value if isinstance(status, Enum) else status
        return getattr(self.status_dirs, key)

    def get_issues_path(self, base: Optional[Path] = None) -> Path:
        """Get the issues root as an absolute path.

        Args:
            base: Directory a relative issues_dir is resolved against
                  (default: current directory)

        Returns:
            Absolute path to the issues root
        """
        if self.issues_dir.is_absolute():
            return self.issues_dir
        return ((base or Path.cwd()) / self.issues_dir).resolve()


def find_config_file(start_path: Path) -> Optional[Path]:
    """Find .bueller.yaml file by walking up directory tree.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to config file, or None if not found
    """
    current = start_path.resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from .bueller.yaml file.

    A relative ``issues_dir`` in the file is resolved against the directory
    holding the file, so commands behave the same from any subdirectory.

    Args:
        path: Path to directory containing config file (default: current directory)

    Returns:
        Loaded configuration (or default if file not found)

    Raises:
        ConfigError: If the file is not valid YAML or fails validation
    """
    if path is None:
        path = Path.cwd()

    config_file = find_config_file(path)

    if config_file is None:
        return Config()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        return Config()

    try:
        config = Config(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

    if not config.issues_dir.is_absolute():
        config.issues_dir = (config_file.parent / config.issues_dir).resolve()

    return config
