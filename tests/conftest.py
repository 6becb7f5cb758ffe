"""Pytest configuration and fixtures for bueller tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolate_from_user_config(tmp_path, monkeypatch):
    """Run every test from an empty directory.

    Keeps a .bueller.yaml in the developer's checkout from leaking into
    tests that load configuration from the current directory.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def issues_root(tmp_path) -> Path:
    """Create an issues root with open/, review/ and stuck/ directories."""
    root = tmp_path / "issues"
    for status in ("open", "review", "stuck"):
        (root / status).mkdir(parents=True)
    return root


@pytest.fixture
def write_issue(issues_root):
    """Write an issue file into a status directory and return its path."""
    def _write(status: str, filename: str, content: str) -> Path:
        path = issues_root / status / filename
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def cli_runner():
    """Create a Click test runner."""
    return CliRunner()
