"""Conversation parsing for issue files.

An issue file is a sequence of messages separated by a line holding only
``---``. Each message starts with an author marker such as ``@user:`` or
``@claude:``::

    @user: Please add a read helper.

    ---

    @claude: Here is a summary of the work I have done:
    - Added read_helper()

Sections without a recognised author marker are dropped, so hand-edited
files never fail to parse.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from bueller.config import DEFAULT_AUTHORS
from bueller.exceptions import ReadError

log = logging.getLogger("bueller.conversation")

MESSAGE_SEPARATOR = "\n---\n"

_AUTHOR_MARKER = re.compile(r"^@(\w+):")


class Message(BaseModel):
    """A single message in an issue conversation."""

    model_config = ConfigDict(frozen=True)

    index: int
    author: str
    content: str


class ParsedConversation(BaseModel):
    """Messages of an issue file in chronological order."""

    model_config = ConfigDict(frozen=True)

    messages: list[Message] = Field(default_factory=list)
    raw_content: str = ""

    @property
    def latest_message(self) -> Optional[Message]:
        return get_latest_message(self)


def parse_conversation(
    content: str,
    authors: Iterable[str] = DEFAULT_AUTHORS,
) -> ParsedConversation:
    """Parse issue content into its conversation history.

    Args:
        content: Raw markdown content of the issue file
        authors: Author tags accepted as message markers

    Returns:
        Parsed conversation; empty when no section is valid
    """
    known_authors = set(authors)
    messages: list[Message] = []

    for section in content.split(MESSAGE_SEPARATOR):
        section = section.strip()
        if not section:
            continue

        match = _AUTHOR_MARKER.match(section)
        if not match or match.group(1) not in known_authors:
            log.debug("Dropping section without author marker: %r", section[:40])
            continue

        messages.append(Message(
            index=len(messages),
            author=match.group(1),
            content=section[match.end():].strip(),
        ))

    return ParsedConversation(messages=messages, raw_content=content)


def read_conversation(
    file_path: Path | str,
    authors: Iterable[str] = DEFAULT_AUTHORS,
) -> ParsedConversation:
    """Read an issue file and parse its conversation history.

    Args:
        file_path: Path to the issue file
        authors: Author tags accepted as message markers

    Returns:
        Parsed conversation

    Raises:
        ReadError: If the file cannot be read
    """
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, str(e)) from e

    return parse_conversation(content, authors)


def get_latest_message(conversation: ParsedConversation) -> Optional[Message]:
    """Get the most recent message, or None for an empty conversation."""
    if not conversation.messages:
        return None
    return conversation.messages[-1]
