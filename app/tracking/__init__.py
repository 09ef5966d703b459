"""Tracking core: group fulfillment, rule resolution, streaks and item selection."""

from app.tracking.group_fulfillment import GroupConfig, get_group_info_for_date, is_group_fulfilled_for_date
from app.tracking.streak import calculate_streak

__all__ = ["GroupConfig", "calculate_streak", "get_group_info_for_date", "is_group_fulfilled_for_date"]
