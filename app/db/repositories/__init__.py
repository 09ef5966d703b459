"""Database repositories."""

from app.db.repositories.profile import ProfileRepository
from app.db.repositories.submission_item import SubmissionItemRepository
from app.db.repositories.submission_rule import SubmissionRuleRepository
from app.db.repositories.submission import SubmissionRepository

__all__ = [
    "ProfileRepository",
    "SubmissionItemRepository",
    "SubmissionRuleRepository",
    "SubmissionRepository",
]
