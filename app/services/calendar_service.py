"""
Calendar service.

Loads a user's items, rules and submissions once and answers per-date
questions with the pure helpers in :mod:`app.tracking`.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.submission import SubmissionRepository
from app.db.repositories.submission_item import SubmissionItemRepository
from app.db.repositories.submission_rule import SubmissionRuleRepository
from app.schemas.calendar import CalendarDayResponse, GroupDayInfo, StreakResponse
from app.services.profile_service import ProfileService
from app.tracking.group_fulfillment import get_group_info_for_date, is_group_fulfilled_for_date
from app.tracking.items import build_item_selection, is_within_submission_window, pending_items
from app.tracking.rules import (
    build_group_configs,
    get_deadline_for_date,
    is_deadline_passed,
    is_rest_day,
    target_days_per_week,
)
from app.tracking.streak import calculate_streak
from app.tracking.weekdays import week_start


class CalendarService:
    """Service for calendar views."""

    def __init__(self, session: Session):
        self.profiles = ProfileService(session)
        self.item_repo = SubmissionItemRepository(session)
        self.rule_repo = SubmissionRuleRepository(session)
        self.submission_repo = SubmissionRepository(session)

    def get_group_info(self, user_id: str, date: datetime.date) -> Optional[GroupDayInfo]:
        self.profiles.get(user_id)
        groups = build_group_configs(self.rule_repo.get_all_by_user(user_id))
        start = week_start(date)
        week = self.submission_repo.get_by_user_date_range(user_id, start, start + datetime.timedelta(days=6))
        return get_group_info_for_date(date, groups, week)

    def get_day(self, user_id: str, date: datetime.date, now: datetime.datetime) -> CalendarDayResponse:
        """Build the full calendar view of *date* as seen at *now*."""
        profile = self.profiles.get(user_id)
        items = self.item_repo.get_all_by_user(user_id)
        rules = self.rule_repo.get_all_by_user(user_id)
        submissions = self.submission_repo.get_all_by_user(user_id)

        try:
            deadline = get_deadline_for_date(rules, date)
            deadline_passed = is_deadline_passed(rules, date, now)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

        rest_day = is_rest_day(rules, date)
        today = now.date()
        in_window = is_within_submission_window(date, today, profile.past_submission_days,
                                                profile.future_submission_days)
        pending = pending_items(items, submissions, date, today, profile.past_submission_days,
                                profile.future_submission_days, rest_day=rest_day, )

        return CalendarDayResponse(date=date, is_rest_day=rest_day, deadline=deadline,
                                   is_deadline_passed=deadline_passed,
                                   is_within_submission_window=in_window,
                                   group=get_group_info_for_date(date, build_group_configs(rules), submissions),
                                   items=build_item_selection(items, submissions, date),
                                   pending_item_ids=[item.id for item in pending], )

    def get_streak(self, user_id: str, today: datetime.date) -> StreakResponse:
        profile = self.profiles.get(user_id)
        rules = self.rule_repo.get_all_by_user(user_id)
        submissions = self.submission_repo.get_all_by_user(user_id)
        groups = build_group_configs(rules)

        result = calculate_streak(submissions, lambda d: is_rest_day(rules, d), shield_stock=0, today=today,
                                  effective_from=profile.gamification_effective_from,
                                  lookback_days=settings.STREAK_LOOKBACK_DAYS,
                                  is_group_fulfilled=lambda d: is_group_fulfilled_for_date(d, groups, submissions), )
        return StreakResponse(as_of=today, current_streak=result.current_streak, shield_days=result.shield_days,
                              revival_days=result.revival_days, perfect_week_count=result.perfect_week_count,
                              shields_consumed=result.shields_consumed, shield_stock=profile.shield_stock,
                              target_days_per_week=target_days_per_week(rules, today), )
