"""Business logic services."""

from app.services.profile_service import ProfileService
from app.services.submission_item_service import SubmissionItemService
from app.services.submission_rule_service import SubmissionRuleService
from app.services.submission_service import SubmissionService
from app.services.calendar_service import CalendarService

__all__ = [
    "ProfileService",
    "SubmissionItemService",
    "SubmissionRuleService",
    "SubmissionService",
    "CalendarService",
]
