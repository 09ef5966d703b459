"""
Submission database model.

A submission is a video, a comment or an applied shield for a target
calendar date.  ``status`` stays ``None`` until an admin reviews it.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Submission(SQLModel, table=True):
    """A single submission of one user."""

    __tablename__ = "submissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="profiles.id", nullable=False, index=True, max_length=64)
    type: str = Field(nullable=False, max_length=10)
    target_date: Optional[datetime.date] = Field(default=None, index=True)
    submission_item_id: Optional[int] = Field(default=None, foreign_key="submission_items.id")

    # Payload
    comment_text: Optional[str] = Field(default=None, max_length=2000)
    r2_key: Optional[str] = Field(default=None, max_length=512)
    duration: Optional[float] = Field(default=None)

    # Review
    status: Optional[str] = Field(default=None, max_length=10)
    is_revival: bool = Field(default=False, nullable=False)
    reviewed_at: Optional[datetime.datetime] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
