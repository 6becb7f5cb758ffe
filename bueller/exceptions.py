"""Exceptions raised by Bueller."""

from pathlib import Path


class BuellerError(Exception):
    """Base class for Bueller errors."""


class ConfigError(BuellerError):
    """Raised when .bueller.yaml cannot be loaded."""


class ReadError(BuellerError):
    """Raised when an issue file cannot be read."""

    def __init__(self, file_path: Path | str, reason: str) -> None:
        self.file_path = Path(file_path)
        self.reason = reason
        super().__init__(f"Failed to read issue file at {self.file_path}: {reason}")
