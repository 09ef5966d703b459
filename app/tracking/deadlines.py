"""Deadline values: ``HH:MM`` cut-off times stored on deadline rules."""

import datetime
import re

_DEADLINE_RE = re.compile(r"(\d{1,2}):(\d{2})")


def parse_deadline(value: str) -> datetime.time:
    """Parse an ``HH:MM`` deadline value.

    Raises:
        ValueError: when the value is not ``HH:MM`` or out of range.
    """
    message = f"Invalid deadline value {value!r}, expected HH:MM"
    match = _DEADLINE_RE.fullmatch(value or "")
    if match is None:
        raise ValueError(message)
    try:
        return datetime.time(int(match.group(1)), int(match.group(2)))
    except ValueError as e:
        raise ValueError(message) from e
