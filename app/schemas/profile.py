"""
Profile API schemas.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Role = Literal["admin", "client"]


class ProfileCreate(BaseModel):
    """Schema for creating a profile."""

    id: str = Field(..., min_length=1, max_length=64, description="User identifier")
    display_name: Optional[str] = Field(None, max_length=255)
    role: Role = "client"


class ProfileUpdate(BaseModel):
    """Schema for updating a profile."""

    display_name: Optional[str] = Field(None, max_length=255)
    past_submission_days: Optional[int] = Field(None, ge=0, le=365)
    future_submission_days: Optional[int] = Field(None, ge=0, le=365)
    gamification_effective_from: Optional[datetime.date] = None


class ProfileResponse(BaseModel):
    """Schema for profile in API responses."""

    id: str
    display_name: Optional[str]
    role: Role
    shield_stock: int
    past_submission_days: int
    future_submission_days: int
    gamification_effective_from: Optional[datetime.date]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
