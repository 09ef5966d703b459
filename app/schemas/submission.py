"""
Submission API schemas.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

SubmissionType = Literal["video", "comment", "shield"]
SubmissionStatus = Literal["success", "fail", "excused"]


class SubmissionCreate(BaseModel):
    """Schema for creating a submission."""

    type: SubmissionType
    target_date: datetime.date
    submission_item_id: Optional[int] = None
    comment_text: Optional[str] = Field(None, max_length=2000)
    r2_key: Optional[str] = Field(None, max_length=512, description="Object key of an uploaded video")
    duration: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def _check_payload(self) -> "SubmissionCreate":
        if self.type == "comment" and not self.comment_text:
            raise ValueError("comment submissions need comment_text")
        if self.type == "video" and not self.r2_key:
            raise ValueError("video submissions need r2_key")
        return self


class SubmissionStatusUpdate(BaseModel):
    """Review decision; ``None`` resets the submission to pending."""

    status: Optional[SubmissionStatus] = None


class SubmissionResponse(BaseModel):
    """Schema for submission in API responses."""

    id: int
    user_id: str
    type: SubmissionType
    target_date: Optional[datetime.date]
    submission_item_id: Optional[int]
    comment_text: Optional[str]
    r2_key: Optional[str]
    duration: Optional[float]
    status: Optional[SubmissionStatus]
    is_revival: bool
    reviewed_at: Optional[datetime.datetime]
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class UnreviewedCountResponse(BaseModel):
    count: int
