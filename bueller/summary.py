"""Issue summaries for terminal display.

A summary abbreviates each message by its position in the conversation:
the first and last messages (the request and the latest outcome) keep up to
``long_limit`` characters, messages in between keep ``short_limit``. The
full text is always kept so chosen messages can be expanded again with
``--index``.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from bueller.config import Config
from bueller.conversation import Message, read_conversation
from bueller.index_spec import parse_index_spec
from bueller.issues import LocatedIssue

log = logging.getLogger("bueller.summary")

ELLIPSIS = "..."

MORE_HINT = "Pass `--index N` or `--index M,N` to see more."


class AbbreviatedMessage(BaseModel):
    """A message prepared for display."""
    index: int
    author: str
    content: str
    is_abbreviated: bool = False
    full_content: str


class IssueSummary(BaseModel):
    """Abbreviated conversation of one issue."""
    issue: LocatedIssue
    abbreviated_messages: list[AbbreviatedMessage]
    message_count: int

    # Set by expand_messages only
    filter_to_indices: Optional[list[int]] = None
    is_single_index: Optional[bool] = None


def abbreviate_message(message: Message, max_length: int) -> AbbreviatedMessage:
    """Truncate a message to max_length characters.

    Truncated content loses trailing whitespace at the cut and ends with an
    ellipsis.

    Args:
        message: The message to abbreviate
        max_length: Maximum length before the ellipsis

    Returns:
        Abbreviated message holding both display and full content
    """
    full_content = message.content

    if len(full_content) <= max_length:
        return AbbreviatedMessage(
            index=message.index,
            author=message.author,
            content=full_content,
            full_content=full_content,
        )

    return AbbreviatedMessage(
        index=message.index,
        author=message.author,
        content=full_content[:max_length].rstrip() + ELLIPSIS,
        is_abbreviated=True,
        full_content=full_content,
    )


def create_abbreviated_messages(
    messages: list[Message],
    long_limit: int = 300,
    short_limit: int = 80,
) -> list[AbbreviatedMessage]:
    """Abbreviate messages using position-dependent limits.

    Args:
        messages: Conversation messages in order
        long_limit: Limit for the first and last message
        short_limit: Limit for every message in between

    Returns:
        Abbreviated messages in the same order
    """
    last = len(messages) - 1
    return [
        abbreviate_message(msg, long_limit if position in (0, last) else short_limit)
        for position, msg in enumerate(messages)
    ]


def summarize_issue(located: LocatedIssue, config: Optional[Config] = None) -> IssueSummary:
    """Summarize an issue file with abbreviated messages.

    Args:
        located: Located issue information
        config: Configuration providing authors and truncation limits

    Returns:
        Issue summary

    Raises:
        ReadError: If the issue file cannot be read
    """
    config = config or Config()
    conversation = read_conversation(located.file_path, config.authors)

    log.debug("Summarizing %s (%d messages)", located.filename, len(conversation.messages))

    return IssueSummary(
        issue=located,
        abbreviated_messages=create_abbreviated_messages(
            conversation.messages,
            long_limit=config.long_limit,
            short_limit=config.short_limit,
        ),
        message_count=len(conversation.messages),
    )


def expand_messages(summary: IssueSummary, index_spec: str) -> IssueSummary:
    """Restore full content for the messages selected by an index spec.

    Indices that don't exist in the conversation are ignored, and ranges are
    clipped to the conversation length.

    Args:
        summary: Issue summary
        index_spec: Index specification (e.g., "3" or "1,3")

    Returns:
        New summary with the selected messages expanded and the filter set,
        or the summary unchanged if index_spec is invalid
    """
    parsed = parse_index_spec(index_spec, limit=summary.message_count)
    if parsed is None:
        log.debug("Ignoring invalid index spec %r", index_spec)
        return summary

    wanted = set(parsed.indices)
    messages = [
        msg.model_copy(update={"content": msg.full_content, "is_abbreviated": False})
        if msg.index in wanted else msg
        for msg in summary.abbreviated_messages
    ]

    return summary.model_copy(update={
        "abbreviated_messages": messages,
        "filter_to_indices": parsed.indices,
        "is_single_index": parsed.is_single_index,
    })


def condense_text(text: str) -> str:
    """Join the non-blank lines of text with single spaces."""
    return " ".join(line.strip() for line in text.split("\n") if line.strip())


def format_issue_summary(summary: IssueSummary, index_spec: Optional[str] = None) -> str:
    """Format an issue summary for console output.

    When the summary carries an index filter only those messages are shown.
    Abbreviated messages are condensed onto one line; full messages keep
    their formatting.

    Args:
        summary: Issue summary, possibly expanded
        index_spec: Index specification the summary was expanded with

    Returns:
        Formatted text
    """
    lines = [f"{summary.issue.status.value}/{summary.issue.filename}"]

    messages = summary.abbreviated_messages
    if summary.filter_to_indices is not None:
        wanted = set(summary.filter_to_indices)
        messages = [msg for msg in messages if msg.index in wanted]

    for msg in messages:
        content = condense_text(msg.content) if msg.is_abbreviated else msg.content
        lines.append(f"[{msg.index}] @{msg.author}: {content}")

    # No hint once a single message is shown in full
    if not index_spec or not summary.is_single_index:
        lines.append("")
        lines.append(MORE_HINT)

    return "\n".join(lines)
