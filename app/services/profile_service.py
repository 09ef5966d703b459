"""
Profile service.

Business logic for user profiles.  Profiles are keyed by the external
user ID; a missing profile is reported as 404, never as a crash.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.profile import ProfileRepository
from app.models.profile import Profile
from app.schemas.profile import ProfileCreate, ProfileUpdate


class ProfileService:
    """Service for profile-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = ProfileRepository(session)

    def create(self, data: ProfileCreate) -> Profile:
        """
        Create a profile for an external user.

        Args:
            data: Profile creation data

        Returns:
            Created profile

        Raises:
            HTTPException: If a profile with this ID already exists
        """
        if self.repository.get_by_id(data.id):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Profile already exists")

        profile = Profile(id=data.id, display_name=data.display_name, role=data.role,
                          past_submission_days=settings.DEFAULT_PAST_SUBMISSION_DAYS,
                          future_submission_days=settings.DEFAULT_FUTURE_SUBMISSION_DAYS, )
        profile = self.repository.create(profile)
        logger.info(f"Created profile {profile.id} (role={profile.role})")
        return profile

    def get(self, user_id: str) -> Profile:
        """
        Get a profile by user ID.

        Args:
            user_id: External user ID

        Returns:
            Profile

        Raises:
            HTTPException: If the profile does not exist
        """
        profile = self.repository.get_by_id(user_id)
        if not profile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return profile

    def list_profiles(self, skip: int = 0, limit: int = 100) -> list[Profile]:
        return self.repository.get_all(skip, limit)

    def update(self, user_id: str, data: ProfileUpdate) -> Profile:
        profile = self.get(user_id)

        if data.display_name is not None:
            profile.display_name = data.display_name
        if data.past_submission_days is not None:
            profile.past_submission_days = data.past_submission_days
        if data.future_submission_days is not None:
            profile.future_submission_days = data.future_submission_days
        if data.gamification_effective_from is not None:
            profile.gamification_effective_from = data.gamification_effective_from

        profile.updated_at = datetime.datetime.utcnow()
        return self.repository.update(profile)

    def adjust_shield_stock(self, profile: Profile, delta: int) -> Profile:
        """Add *delta* shields, keeping the stock within ``[0, SHIELD_STOCK_MAX]``."""
        profile.shield_stock = max(0, min(settings.SHIELD_STOCK_MAX, profile.shield_stock + delta))
        profile.updated_at = datetime.datetime.utcnow()
        return self.repository.update(profile)
