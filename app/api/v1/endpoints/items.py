"""
Submission item endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_path_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.submission_item import SubmissionItemCreate, SubmissionItemResponse
from app.services.submission_item_service import SubmissionItemService

router = APIRouter()


@router.get("", summary="List a user's submission items (oldest first).",
            response_model=list[SubmissionItemResponse], )
def list_items(db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return SubmissionItemService(db).list_items(profile.id)


@router.post("", summary="Add a submission item.", response_model=SubmissionItemResponse,
             status_code=status.HTTP_201_CREATED, )
def create_item(data: SubmissionItemCreate, db: Session = Depends(get_db),
                profile: Profile = Depends(get_path_profile), ):
    return SubmissionItemService(db).create(profile.id, data)


@router.delete("/{item_id}", summary="Remove a submission item (ends it if already used).",
               status_code=status.HTTP_204_NO_CONTENT, )
def remove_item(item_id: int, as_of: Optional[datetime.date] = Query(None, description="Defaults to today"),
                db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile), ):
    SubmissionItemService(db).remove(profile.id, item_id, as_of or datetime.date.today())
