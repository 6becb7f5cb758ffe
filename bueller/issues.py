"""Issue lookup for the Bueller queue.

Issues live as flat markdown files under one directory per status:

    issues/open/p1-003-read-helper.md
    issues/review/p1-002-parser.md
    issues/stuck/p0-001-auth.md

This module finds them by filename or path. It never moves or writes issue
files; that belongs to the agent loop.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bueller.config import Config

log = logging.getLogger("bueller.issues")

ISSUE_SUFFIX = ".md"


class IssueStatus(str, Enum):
    """Issue status, in search priority order."""
    OPEN = "open"
    REVIEW = "review"
    STUCK = "stuck"


class LocatedIssue(BaseModel):
    """An issue file and the status directory it was found in."""

    model_config = ConfigDict(frozen=True)

    file_path: Path
    status: IssueStatus
    filename: str


def _status_path(issues_dir: Path | str, status: IssueStatus, config: Config) -> Path:
    return Path(issues_dir) / config.status_dir(status)


def locate_issue_file(
    filename: str,
    issues_dir: Path | str,
    config: Optional[Config] = None,
) -> Optional[LocatedIssue]:
    """Search the status directories for an issue file.

    Directories are checked in order open, review, stuck; the first match
    wins.

    Args:
        filename: Issue filename (e.g., "p1-003-read-helper-002.md")
        issues_dir: Issues root directory
        config: Configuration providing status directory names

    Returns:
        Located issue, or None if no status directory has the file
    """
    config = config or Config()

    for status in IssueStatus:
        file_path = _status_path(issues_dir, status, config) / filename
        if file_path.is_file():
            return LocatedIssue(
                file_path=file_path.absolute(),
                status=status,
                filename=filename,
            )
        log.debug("Issue %s not in %s", filename, file_path.parent)

    return None


def infer_status_from_path(file_path: Path | str, config: Optional[Config] = None) -> IssueStatus:
    """Infer an issue's status from the directories in its path.

    Args:
        file_path: Absolute path to an issue file
        config: Configuration providing status directory names

    Returns:
        REVIEW or STUCK when the path passes through that directory, else OPEN
    """
    config = config or Config()
    posix = Path(file_path).as_posix()

    for status in (IssueStatus.REVIEW, IssueStatus.STUCK):
        if f"/{config.status_dir(status)}/" in posix:
            return status
    return IssueStatus.OPEN


def resolve_issue_reference(
    reference: str,
    issues_dir: Path | str,
    config: Optional[Config] = None,
) -> Optional[LocatedIssue]:
    """Resolve an issue reference (path or filename) to a located issue.

    References containing a path separator are treated as file paths,
    relative ones being resolved against the current directory. Anything
    else is a filename searched for in the status directories.

    Args:
        reference: File path or filename
        issues_dir: Issues root directory
        config: Configuration providing status directory names

    Returns:
        Located issue, or None if not found
    """
    if "/" in reference or "\\" in reference:
        file_path = Path(reference)
        if not file_path.is_absolute():
            file_path = Path(os.path.abspath(file_path))
        if not file_path.is_file():
            log.debug("Issue path %s does not exist", file_path)
            return None
        return LocatedIssue(
            file_path=file_path,
            status=infer_status_from_path(file_path, config),
            filename=file_path.name,
        )

    return locate_issue_file(reference, issues_dir, config)


def normalize_issue_reference(reference: str) -> str:
    """Append the .md suffix to a reference that lacks one.

    Absolute paths are left untouched.

    Examples:
        "p1-003" -> "p1-003.md"
        "p1-003.md" -> "p1-003.md"
    """
    if reference.endswith(ISSUE_SUFFIX) or os.path.isabs(reference):
        return reference
    return f"{reference}{ISSUE_SUFFIX}"


def list_issues(
    issues_dir: Path | str,
    status: IssueStatus = IssueStatus.OPEN,
    config: Optional[Config] = None,
) -> list[str]:
    """List issue filenames in one status directory.

    Filenames sort by the p{priority}-{order} naming convention, so the
    first entry of the open list is the next issue the agent loop picks up.

    Args:
        issues_dir: Issues root directory
        status: Status directory to list
        config: Configuration providing status directory names

    Returns:
        Sorted issue filenames (empty if the directory doesn't exist)
    """
    config = config or Config()
    status_path = _status_path(issues_dir, status, config)

    if not status_path.is_dir():
        return []

    return sorted(
        p.name for p in status_path.iterdir()
        if p.is_file() and p.name.endswith(ISSUE_SUFFIX)
    )
