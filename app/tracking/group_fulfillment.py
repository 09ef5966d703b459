"""
Group fulfillment of grouped-day requirements on the calendar.

A *group* bundles several weekdays with a required count, e.g. "any 2
of Sat/Sun" or "any 1 of Mon/Wed/Fri".  Within one Monday-start week
the user only has to post on ``required_count`` of the group's days;
once that threshold is met the remaining group days of the week are
*fulfilled* and the calendar shows them as not needed.

Model
-----
For a calendar date ``d``:

1. Find the group whose weekday set contains ``d``'s weekday and whose
   effective range ``[effective_from, effective_to)`` contains ``d``.
   Exactly one group must match; otherwise ``d`` is not a group day.
2. Collect the *posted dates*: target dates of submissions whose status
   is anything but ``"fail"`` (a pending submission counts as posted).
3. Walk the group's weekdays inside the week containing ``d``, skipping
   days outside the group's effective range, and count the posted ones.
4. ``d`` is fulfilled when it has no post itself and the count already
   meets the group's ``required_count``.

Everything here is pure: no database access, no clock.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Protocol

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from app.schemas.calendar import GroupDayInfo
from app.tracking.weekdays import (
    DAY_LABELS,
    date_in_week,
    day_of_week,
    monday_first_key,
    validate_day_of_week,
    week_start,
)

FAIL_STATUS = "fail"


class SubmissionMark(Protocol):
    """Minimal view of a submission needed for fulfillment checks."""

    target_date: Optional[datetime.date]
    status: Optional[str]


# ======================================================================
# Configuration
# ======================================================================


class GroupConfig(BaseModel):
    """A grouped-day requirement.

    ``days_of_week`` uses the Sunday-zero numbering of stored rules.
    ``effective_to`` is exclusive; ``None`` means open-ended.
    """

    group_id: Optional[str] = None
    days_of_week: list[int] = Field(..., min_length=1)
    required_count: int = Field(..., ge=1)
    effective_from: datetime.date
    effective_to: Optional[datetime.date] = None

    @field_validator("days_of_week")
    @classmethod
    def _check_days(cls, value: list[int]) -> list[int]:
        for dow in value:
            validate_day_of_week(dow)
        return value

    def is_active_on(self, date: datetime.date) -> bool:
        """Whether *date* lies in ``[effective_from, effective_to)``."""
        if date < self.effective_from:
            return False
        return self.effective_to is None or date < self.effective_to

    def covers(self, date: datetime.date) -> bool:
        """Whether *date* is one of this group's active weekdays."""
        return day_of_week(date) in self.days_of_week and self.is_active_on(date)


# ======================================================================
# Helpers
# ======================================================================


def format_group_label(days_of_week: Iterable[int]) -> str:
    """Concatenate weekday labels in Monday-first order, e.g. ``土日``."""
    return "".join(DAY_LABELS[d] for d in sorted(set(days_of_week), key=monday_first_key))


def _posted_dates(submissions: Iterable[SubmissionMark]) -> set[datetime.date]:
    return {s.target_date for s in submissions if s.target_date is not None and s.status != FAIL_STATUS}


def _find_group(date: datetime.date, group_configs: Iterable[GroupConfig]) -> Optional[GroupConfig]:
    matches = [g for g in group_configs if g.covers(date)]
    if len(matches) > 1:
        logger.warning(
            f"{len(matches)} groups cover {date.isoformat()} "
            f"({', '.join(format_group_label(g.days_of_week) for g in matches)}); treating as no group"
        )
        return None
    return matches[0] if matches else None


def _count_posted_days(group: GroupConfig, start: datetime.date, posted: set[datetime.date]) -> int:
    count = 0
    for dow in set(group.days_of_week):
        day = date_in_week(start, dow)
        if not group.is_active_on(day):
            continue
        if day in posted:
            count += 1
    return count


# ======================================================================
# Main entry points
# ======================================================================


def get_group_info_for_date(date: datetime.date, group_configs: Iterable[GroupConfig],
                            submissions: Iterable[SubmissionMark], ) -> Optional[GroupDayInfo]:
    """Compute the group state of *date*.

    Args:
        date: Calendar date to inspect.
        group_configs: All group configurations of the user.
        submissions: The user's submissions (any object exposing
            ``target_date`` and ``status``).

    Returns:
        ``None`` if *date* is not a group day, otherwise a
        :class:`GroupDayInfo` with the weekly count and fulfillment flag.
    """
    group = _find_group(date, group_configs)
    if group is None:
        return None

    posted = _posted_dates(submissions)
    posted_days_count = _count_posted_days(group, week_start(date), posted)

    is_fulfilled = date not in posted and posted_days_count >= group.required_count

    return GroupDayInfo(group_id=group.group_id, group_label=format_group_label(group.days_of_week),
                        required_count=group.required_count, posted_days_count=posted_days_count,
                        is_fulfilled=is_fulfilled, )


def is_group_fulfilled_for_date(date: datetime.date, group_configs: Iterable[GroupConfig],
                                submissions: Iterable[SubmissionMark], ) -> bool:
    """Shortcut: ``True`` only for a group day already covered by other posts."""
    info = get_group_info_for_date(date, group_configs, submissions)
    return info.is_fulfilled if info else False
