"""
Admin endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.submission import UnreviewedCountResponse
from app.services.submission_service import SubmissionService

router = APIRouter()


@router.get("/{admin_id}/unreviewed-count", summary="Count video submissions awaiting review.",
            response_model=UnreviewedCountResponse, )
def get_unreviewed_count(admin_id: str, db: Session = Depends(get_db)):
    return UnreviewedCountResponse(count=SubmissionService(db).count_unreviewed(admin_id))
