"""
Submission item API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class SubmissionItemCreate(BaseModel):
    """Schema for creating a submission item."""

    name: str = Field(..., min_length=1, max_length=255)
    effective_from: Optional[datetime.date] = Field(None, description="First day the item applies (defaults to today)")
    effective_to: Optional[datetime.date] = Field(None, description="First day the item no longer applies")

    @model_validator(mode="after")
    def _check_range(self) -> "SubmissionItemCreate":
        if self.effective_from and self.effective_to and self.effective_to <= self.effective_from:
            raise ValueError("effective_to must be after effective_from")
        return self


class SubmissionItemResponse(BaseModel):
    """Schema for submission item in API responses."""

    id: int
    user_id: str
    name: str
    effective_from: datetime.date
    effective_to: Optional[datetime.date]
    created_at: datetime.datetime

    class Config:
        from_attributes = True
