"""
Shared API dependencies.

Reusable FastAPI dependencies for database access and path users.
Authentication happens upstream; the user ID arrives in the path.
"""

from fastapi import Depends, Path
from sqlmodel import Session

from app.db.session import get_db
from app.models.profile import Profile
from app.services.profile_service import ProfileService


def get_path_profile(user_id: str = Path(..., description="External user ID"),
                     db: Session = Depends(get_db), ) -> Profile:
    """Resolve the ``{user_id}`` path segment to an existing profile (404 otherwise)."""
    return ProfileService(db).get(user_id)
