"""
Profile database model.

One row per user of the hosted auth service.  The ``id`` is the
external user identifier; this service never stores credentials.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Profile(SQLModel, table=True):
    """
    User profile.

    Holds the role, per-user submission window and gamification state.
    """
    __tablename__ = "profiles"

    id: str = Field(primary_key=True, max_length=64)
    display_name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default="client", max_length=10, nullable=False)

    # Gamification
    shield_stock: int = Field(default=0, nullable=False)
    gamification_effective_from: Optional[datetime.date] = Field(default=None)

    # Submission window around today
    past_submission_days: int = Field(default=7, nullable=False)
    future_submission_days: int = Field(default=7, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
