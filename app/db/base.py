"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.profile import Profile  # noqa: F401
from app.models.submission_item import SubmissionItem  # noqa: F401
from app.models.submission_rule import SubmissionRule  # noqa: F401
from app.models.submission import Submission  # noqa: F401
