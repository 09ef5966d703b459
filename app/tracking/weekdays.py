"""
Weekday helpers.

Stored rules use the Sunday-zero numbering (``0`` = Sunday,
``6`` = Saturday) while calendar weeks start on Monday.  These helpers
bridge the two so the rest of the package never touches
:meth:`datetime.date.weekday` directly.
"""

import datetime

SUNDAY = 0
SATURDAY = 6

# Single-character labels indexed by Sunday-zero weekday.
DAY_LABELS: tuple[str, ...] = ("日", "月", "火", "水", "木", "金", "土")


def day_of_week(date: datetime.date) -> int:
    """Return the Sunday-zero weekday of *date*."""
    return (date.weekday() + 1) % 7


def monday_first_key(dow: int) -> int:
    """Sort key that orders Monday first and Sunday last."""
    return 7 if dow == SUNDAY else dow


def week_start(date: datetime.date) -> datetime.date:
    """Monday of the week containing *date*."""
    return date - datetime.timedelta(days=date.weekday())


def date_in_week(start: datetime.date, dow: int) -> datetime.date:
    """Date of Sunday-zero weekday *dow* in the week beginning on *start*."""
    offset = 6 if dow == SUNDAY else dow - 1
    return start + datetime.timedelta(days=offset)


def validate_day_of_week(dow: int) -> int:
    if not SUNDAY <= dow <= SATURDAY:
        raise ValueError(f"day_of_week must be between 0 and 6, got {dow}")
    return dow
