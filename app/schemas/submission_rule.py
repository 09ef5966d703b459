"""
Submission rule API schemas.

Groups and rest days have dedicated create schemas because one request
produces one rule row per weekday.
"""

import datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from app.tracking.deadlines import parse_deadline

RuleType = Literal["deadline", "target_day", "rest_day", "group"]
Scope = Literal["monthly", "weekly", "daily"]
DayOfWeek = Annotated[int, Field(ge=0, le=6)]


class SubmissionRuleCreate(BaseModel):
    """Schema for creating a single deadline / target-day / rest-day rule."""

    rule_type: Literal["deadline", "target_day", "rest_day"]
    scope: Scope
    day_of_week: Optional[int] = Field(None, ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    specific_date: Optional[datetime.date] = None
    value: Optional[str] = Field(None, max_length=50, description="HH:MM for deadlines")
    effective_from: Optional[datetime.date] = None

    @model_validator(mode="after")
    def _check_scope(self) -> "SubmissionRuleCreate":
        if self.scope == "weekly" and self.day_of_week is None:
            raise ValueError("weekly rules need day_of_week")
        if self.scope == "daily" and self.specific_date is None:
            raise ValueError("daily rules need specific_date")
        if self.rule_type == "deadline":
            parse_deadline(self.value)
        return self


class GroupRuleCreate(BaseModel):
    """Schema for creating a grouped-day requirement."""

    days_of_week: list[DayOfWeek] = Field(..., min_length=2, max_length=7)
    required_count: int = Field(..., ge=1, le=6)
    effective_from: Optional[datetime.date] = None


class RestDayRuleCreate(BaseModel):
    """Schema for creating weekly rest days."""

    days_of_week: list[DayOfWeek] = Field(..., min_length=1, max_length=7)
    effective_from: Optional[datetime.date] = None


class SubmissionRuleResponse(BaseModel):
    """Schema for submission rule in API responses."""

    id: int
    user_id: str
    rule_type: RuleType
    scope: Scope
    day_of_week: Optional[int]
    specific_date: Optional[datetime.date]
    value: Optional[str]
    group_id: Optional[str]
    group_required_count: Optional[int]
    effective_from: datetime.date
    effective_to: Optional[datetime.date]
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class GroupConfigResponse(BaseModel):
    """A collapsed group (one entry per ``group_id``)."""

    group_id: str
    label: str
    days_of_week: list[int]
    required_count: int
    effective_from: datetime.date
    effective_to: Optional[datetime.date]
