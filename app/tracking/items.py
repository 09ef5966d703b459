"""
Submission item selection.

Decides which items are offered for a calendar day and which of them
are already completed.  An item is *effective* on a date when the date
lies in its ``[effective_from, effective_to)`` range.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Protocol, TypeVar

from app.schemas.calendar import ItemOption


class ItemView(Protocol):
    id: Optional[int]
    name: str
    effective_from: datetime.date
    effective_to: Optional[datetime.date]


class ItemSubmissionView(Protocol):
    target_date: Optional[datetime.date]
    submission_item_id: Optional[int]


ItemT = TypeVar("ItemT", bound=ItemView)


def is_item_effective(item: ItemView, date: datetime.date) -> bool:
    if date < item.effective_from:
        return False
    return item.effective_to is None or date < item.effective_to


def effective_items(items: Iterable[ItemT], date: datetime.date) -> list[ItemT]:
    """Items effective on *date*, in the caller's order."""
    return [item for item in items if is_item_effective(item, date)]


def submitted_item_ids(submissions: Iterable[ItemSubmissionView], date: datetime.date) -> set[int]:
    return {s.submission_item_id for s in submissions if s.target_date == date and s.submission_item_id is not None}


def build_item_selection(items: Iterable[ItemView], submissions: Iterable[ItemSubmissionView],
                         date: datetime.date, ) -> list[ItemOption]:
    """One option per effective item, flagged when already submitted on *date*."""
    completed = submitted_item_ids(submissions, date)
    return [ItemOption(item_id=item.id, name=item.name, is_completed=item.id in completed) for item in
            effective_items(items, date)]


def is_within_submission_window(date: datetime.date, today: datetime.date, past_days: int,
                                future_days: int, ) -> bool:
    """Today is always open; other days must be within the configured distance."""
    diff = (date - today).days
    if diff == 0:
        return True
    if diff > 0:
        return diff <= future_days
    return -diff <= past_days


def pending_items(items: Iterable[ItemT], submissions: Iterable[ItemSubmissionView], date: datetime.date,
                  today: datetime.date, past_days: int, future_days: int, rest_day: bool = False, ) -> list[ItemT]:
    """Effective items still waiting for a submission on *date*.

    Nothing is pending on rest days or outside the submission window.
    """
    if rest_day or not is_within_submission_window(date, today, past_days, future_days):
        return []
    done = submitted_item_ids(submissions, date)
    return [item for item in effective_items(items, date) if item.id not in done]
