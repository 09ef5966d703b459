"""Pydantic schemas for request/response validation."""

from app.schemas.calendar import CalendarDayResponse, GroupDayInfo, ItemOption, StreakResponse
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.schemas.stepper import StepRequest, StepResponse
from app.schemas.submission import (
    SubmissionCreate,
    SubmissionResponse,
    SubmissionStatusUpdate,
    UnreviewedCountResponse,
)
from app.schemas.submission_item import SubmissionItemCreate, SubmissionItemResponse
from app.schemas.submission_rule import (
    GroupConfigResponse,
    GroupRuleCreate,
    RestDayRuleCreate,
    SubmissionRuleCreate,
    SubmissionRuleResponse,
)

__all__ = [
    "CalendarDayResponse",
    "GroupDayInfo",
    "ItemOption",
    "StreakResponse",
    "ProfileCreate",
    "ProfileResponse",
    "ProfileUpdate",
    "StepRequest",
    "StepResponse",
    "SubmissionCreate",
    "SubmissionResponse",
    "SubmissionStatusUpdate",
    "UnreviewedCountResponse",
    "SubmissionItemCreate",
    "SubmissionItemResponse",
    "GroupConfigResponse",
    "GroupRuleCreate",
    "RestDayRuleCreate",
    "SubmissionRuleCreate",
    "SubmissionRuleResponse",
]
