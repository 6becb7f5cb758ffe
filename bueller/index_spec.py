"""Message index specifications.

The ``--index`` option accepts either one message index or an inclusive
range:

    "3"    -> message 3
    "1,3"  -> messages 1, 2 and 3

Invalid specs parse to None rather than raising, so callers can fall back
to the default view.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class IndexSpec(BaseModel):
    """Parsed index specification."""

    model_config = ConfigDict(frozen=True)

    indices: list[int]
    is_single_index: bool


def _parse_index(part: str) -> Optional[int]:
    """Parse one non-negative index, or None if it isn't one."""
    if not (part.isascii() and part.isdigit()):
        return None
    return int(part)


def parse_index_spec(spec: str, limit: Optional[int] = None) -> Optional[IndexSpec]:
    """Parse an index specification (e.g., "3" or "1,3").

    Args:
        spec: Index specification string
        limit: Number of messages available; a range is clipped to indices
               below it (a single index is kept as given)

    Returns:
        IndexSpec with the requested indices, or None if the spec is invalid
        (more than two parts, non-numeric or negative parts, end < start)

    Examples:
        parse_index_spec("1,3")            -> indices [1, 2, 3]
        parse_index_spec("1,999", limit=4) -> indices [1, 2, 3]
        parse_index_spec("5,9", limit=4)   -> indices []
    """
    parts = [part.strip() for part in spec.split(",")]

    if len(parts) == 1:
        index = _parse_index(parts[0])
        if index is None:
            return None
        return IndexSpec(indices=[index], is_single_index=True)

    if len(parts) == 2:
        start = _parse_index(parts[0])
        end = _parse_index(parts[1])
        if start is None or end is None or end < start:
            return None
        if limit is not None:
            end = min(end, limit - 1)
        return IndexSpec(indices=list(range(start, end + 1)), is_single_index=False)

    return None
