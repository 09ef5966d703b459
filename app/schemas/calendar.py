"""
Calendar API schemas.

Per-day views combining group fulfillment, rest days, deadlines and
item selection, plus the on-demand streak.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GroupDayInfo(BaseModel):
    """Group state of a single calendar date."""

    group_id: Optional[str] = None
    group_label: str = Field(..., description="Weekday labels in Monday-first order, e.g. '土日'")
    required_count: int = Field(..., description="Posts required per week within the group")
    posted_days_count: int = Field(..., description="Group days of this week that already have a post")
    is_fulfilled: bool = Field(..., description="True when this day has no post and the group is already satisfied")


class ItemOption(BaseModel):
    """A selectable submission item for a date."""

    item_id: int
    name: str
    is_completed: bool


class CalendarDayResponse(BaseModel):
    """Everything the calendar needs to render one date."""

    date: datetime.date
    is_rest_day: bool
    deadline: Optional[datetime.time]
    is_deadline_passed: bool
    is_within_submission_window: bool
    group: Optional[GroupDayInfo]
    items: list[ItemOption]
    pending_item_ids: list[int]


class StreakResponse(BaseModel):
    """Current streak as of a reference date."""

    as_of: datetime.date
    current_streak: int
    shield_days: list[datetime.date]
    revival_days: list[datetime.date]
    perfect_week_count: int
    shields_consumed: int
    shield_stock: int
    target_days_per_week: int
