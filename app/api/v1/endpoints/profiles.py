"""
Profile endpoints.

Profiles mirror users of the hosted auth service.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from app.services.profile_service import ProfileService

router = APIRouter()


@router.post("", summary="Create a profile for a user.", response_model=ProfileResponse,
             status_code=status.HTTP_201_CREATED, )
def create_profile(data: ProfileCreate, db: Session = Depends(get_db)):
    return ProfileService(db).create(data)


@router.get("", summary="List profiles (oldest first).", response_model=list[ProfileResponse])
def list_profiles(skip: int = Query(0, ge=0), limit: int = Query(100, ge=1, le=500), db: Session = Depends(get_db)):
    return ProfileService(db).list_profiles(skip, limit)


@router.get("/{user_id}/profile", summary="Get a user's profile.", response_model=ProfileResponse)
def get_profile(user_id: str, db: Session = Depends(get_db)):
    return ProfileService(db).get(user_id)


@router.put("/{user_id}/profile", summary="Update a user's profile.", response_model=ProfileResponse)
def update_profile(user_id: str, data: ProfileUpdate, db: Session = Depends(get_db)):
    return ProfileService(db).update(user_id, data)
