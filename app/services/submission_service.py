"""
Submission service.

Creates submissions (flagging revivals of missed days), applies shields,
records review decisions and serves the admin's unreviewed count.

A shield is a submission of type ``shield``: it consumes one unit of the
profile's ``shield_stock`` and may only be placed on a date that has no
regular (video/comment) submission and no other shield.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.submission import SubmissionRepository
from app.db.repositories.submission_rule import SubmissionRuleRepository
from app.models.submission import Submission
from app.schemas.submission import SubmissionCreate, SubmissionStatusUpdate
from app.services.profile_service import ProfileService
from app.services.submission_item_service import SubmissionItemService
from app.tracking.group_fulfillment import is_group_fulfilled_for_date
from app.tracking.items import is_item_effective
from app.tracking.rules import build_group_configs, is_rest_day
from app.tracking.streak import SUCCESS_STATUS, calculate_shield_reward, calculate_streak, is_revival_candidate

SHIELD_TYPE = "shield"


class SubmissionService:
    """Service for submission business logic."""

    def __init__(self, session: Session):
        self.repository = SubmissionRepository(session)
        self.rule_repo = SubmissionRuleRepository(session)
        self.profiles = ProfileService(session)
        self.items = SubmissionItemService(session)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_submissions(self, user_id: str) -> list[Submission]:
        return self.repository.get_all_by_user(user_id)

    def get_history(self, user_id: str) -> list[Submission]:
        return self.repository.get_history(user_id)

    def count_unreviewed(self, admin_id: str) -> int:
        """Unreviewed video submissions across all users; 0 for non-admins."""
        profile = self.profiles.get(admin_id)
        if not profile.is_admin:
            return 0
        return self.repository.count_unreviewed_videos()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create(self, user_id: str, data: SubmissionCreate, today: datetime.date) -> Submission:
        profile = self.profiles.get(user_id)

        if data.type == SHIELD_TYPE:
            return self._apply_shield(user_id, data.target_date)

        if data.submission_item_id is not None:
            item = self.items.get_owned(user_id, data.submission_item_id)
            if not is_item_effective(item, data.target_date):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                    detail=f"Item '{item.name}' is not active on {data.target_date.isoformat()}", )

        existing = self.repository.get_all_by_user(user_id)
        rules = self.rule_repo.get_all_by_user(user_id)
        is_revival = is_revival_candidate(data.target_date, existing, lambda d: is_rest_day(rules, d), today)

        entry = Submission(user_id=profile.id, type=data.type, target_date=data.target_date,
                           submission_item_id=data.submission_item_id, comment_text=data.comment_text,
                           r2_key=data.r2_key, duration=data.duration, is_revival=is_revival, )
        entry = self.repository.create(entry)
        logger.info(f"Submission {entry.id} ({entry.type}) for {user_id} on {entry.target_date}"
                    f"{' [revival]' if is_revival else ''}")
        return entry

    def update_status(self, user_id: str, entry_id: int, data: SubmissionStatusUpdate,
                      today: datetime.date, ) -> Submission:
        """Record a review decision.

        Setting a status stamps ``reviewed_at``; clearing it resets the
        submission to pending.  Approving may award a shield when the
        streak completes a straight week.
        """
        entry = self._get_owned_entry(user_id, entry_id)
        entry.status = data.status
        entry.reviewed_at = datetime.datetime.utcnow() if data.status else None
        entry = self.repository.update(entry)

        if data.status == SUCCESS_STATUS:
            self._award_shield(user_id, today)
        return entry

    def delete(self, user_id: str, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply_shield(self, user_id: str, target_date: datetime.date) -> Submission:
        profile = self.profiles.get(user_id)
        same_day = [s for s in self.repository.get_all_by_user(user_id) if s.target_date == target_date]
        if same_day:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"{target_date.isoformat()} already has a submission", )
        if profile.shield_stock <= 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No shields left")

        entry = self.repository.create(
            Submission(user_id=user_id, type=SHIELD_TYPE, target_date=target_date, status=SUCCESS_STATUS,
                       reviewed_at=datetime.datetime.utcnow(), ))
        self.profiles.adjust_shield_stock(profile, -1)
        logger.info(f"Shield applied for {user_id} on {target_date}, {profile.shield_stock} left")
        return entry

    def _award_shield(self, user_id: str, today: datetime.date) -> None:
        profile = self.profiles.get(user_id)
        rules = self.rule_repo.get_all_by_user(user_id)
        submissions = self.repository.get_all_by_user(user_id)
        groups = build_group_configs(rules)

        # Shields already placed count as approvals; the stock is not spent again here.
        result = calculate_streak(submissions, lambda d: is_rest_day(rules, d), shield_stock=0, today=today,
                                  effective_from=profile.gamification_effective_from,
                                  lookback_days=settings.STREAK_LOOKBACK_DAYS,
                                  is_group_fulfilled=lambda d: is_group_fulfilled_for_date(d, groups, submissions), )
        used_shield_or_revival = result.started_on is not None and any(
            s.type == SHIELD_TYPE or s.is_revival for s in submissions if
            s.target_date is not None and result.started_on <= s.target_date <= today)
        reward = calculate_shield_reward(result.current_streak, profile.shield_stock, used_shield_or_revival,
                                         max_stock=settings.SHIELD_STOCK_MAX, )
        if reward:
            self.profiles.adjust_shield_stock(profile, reward)
            logger.info(f"Awarded {reward} shield to {user_id} (streak={result.current_streak})")

    def _get_owned_entry(self, user_id: str, entry_id: int) -> Submission:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found", )
        return entry
