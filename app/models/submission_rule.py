"""
Submission rule database model.

One row per rule and weekday/date.  Group rules spread over several
rows that share ``group_id`` and ``group_required_count``.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SubmissionRule(SQLModel, table=True):
    """A deadline, target-day, rest-day or group rule of one user.

    ``day_of_week`` uses 0 = Sunday ... 6 = Saturday.
    """

    __tablename__ = "submission_rules"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="profiles.id", nullable=False, index=True, max_length=64)

    rule_type: str = Field(nullable=False, max_length=20)
    scope: str = Field(nullable=False, max_length=10)
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    specific_date: Optional[datetime.date] = Field(default=None)
    value: Optional[str] = Field(default=None, max_length=50)

    # Group rules
    group_id: Optional[str] = Field(default=None, max_length=36, index=True)
    group_required_count: Optional[int] = Field(default=None)

    # Half-open validity range
    effective_from: datetime.date = Field(default_factory=datetime.date.today, nullable=False)
    effective_to: Optional[datetime.date] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
