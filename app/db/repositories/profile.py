"""
Profile repository.

Handles database operations for Profile model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.profile import Profile


class ProfileRepository:
    """Repository for Profile database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, profile: Profile) -> Profile:
        """
        Create a new profile in the database.

        Args:
            profile: Profile instance to create

        Returns:
            Created profile
        """
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        """
        Get profile by user ID.

        Args:
            profile_id: External user ID

        Returns:
            Profile instance if found, None otherwise
        """
        return self.session.get(Profile, profile_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Profile]:
        """
        Get all profiles with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of profiles
        """
        statement = select(Profile).order_by(Profile.created_at).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def update(self, profile: Profile) -> Profile:
        """
        Update an existing profile.

        Args:
            profile: Profile instance with updated data

        Returns:
            Updated profile
        """
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile
