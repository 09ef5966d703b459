"""SQLModel database models."""

from app.models.profile import Profile
from app.models.submission_item import SubmissionItem
from app.models.submission_rule import SubmissionRule
from app.models.submission import Submission

__all__ = [
    "Profile",
    "SubmissionItem",
    "SubmissionRule",
    "Submission",
]
