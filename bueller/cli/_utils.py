"""Shared utilities for CLI modules."""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from bueller.config import Config, load_config
from bueller.exceptions import ConfigError

# Shared Rich console instances for all CLI modules
console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    err_console.print(f"[red]Error: {escape(message)}[/red]")


def configure_logging(verbose: bool) -> None:
    """Send bueller log records to stderr (DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def get_config(issues_dir: Optional[Path]) -> Config:
    """Load configuration, applying a --issues-dir override.

    Exits:
        With code 1 if .bueller.yaml is invalid
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    if issues_dir is not None:
        config.issues_dir = issues_dir.resolve()
    return config


__all__ = [
    "console",
    "err_console",
    "print_error",
    "configure_logging",
    "get_config",
    "Config",
]
