"""
Submission endpoints.

Listing, history, creation, review and deletion of submissions.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_path_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.submission import SubmissionCreate, SubmissionResponse, SubmissionStatusUpdate
from app.services.submission_service import SubmissionService

router = APIRouter()


@router.get("", summary="List a user's submissions (newest first).", response_model=list[SubmissionResponse], )
def list_submissions(db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return SubmissionService(db).list_submissions(profile.id)


@router.get("/history", summary="Submission history by target date.", response_model=list[SubmissionResponse], )
def get_history(db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return SubmissionService(db).get_history(profile.id)


@router.post("", summary="Create a submission or apply a shield.", response_model=SubmissionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_submission(data: SubmissionCreate,
                      as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                      db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile), ):
    return SubmissionService(db).create(profile.id, data, as_of or datetime.date.today())


@router.patch("/{submission_id}/status", summary="Approve, reject, excuse or reset a submission.",
              response_model=SubmissionResponse, )
def update_status(submission_id: int, data: SubmissionStatusUpdate,
                  as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
                  db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile), ):
    return SubmissionService(db).update_status(profile.id, submission_id, data, as_of or datetime.date.today())


@router.delete("/{submission_id}", summary="Delete a submission.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_submission(submission_id: int, db: Session = Depends(get_db),
                      profile: Profile = Depends(get_path_profile), ):
    SubmissionService(db).delete(profile.id, submission_id)
