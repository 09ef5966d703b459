"""
Submission item database model.

An item is one thing the user submits for (e.g. "Squats", "Run").
Items apply on ``[effective_from, effective_to)``.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SubmissionItem(SQLModel, table=True):
    """A submission item configured for one user."""

    __tablename__ = "submission_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="profiles.id", nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=255)

    effective_from: datetime.date = Field(default_factory=datetime.date.today, nullable=False)
    effective_to: Optional[datetime.date] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
