"""
Calendar endpoints.

Per-date view (group fulfillment, rest day, deadline, items) and the
on-demand streak.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_path_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.calendar import CalendarDayResponse, GroupDayInfo, StreakResponse
from app.services.calendar_service import CalendarService

router = APIRouter()


@router.get("/streak", summary="Get the current streak.", response_model=StreakResponse, )
def get_streak(as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
               db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile), ):
    return CalendarService(db).get_streak(profile.id, as_of or datetime.date.today())


@router.get("/{date}", summary="Get the calendar view of a date.", response_model=CalendarDayResponse, )
def get_day(date: datetime.date,
            now: Optional[datetime.datetime] = Query(None, description="Reference datetime (defaults to now)"),
            db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile), ):
    return CalendarService(db).get_day(profile.id, date, now or datetime.datetime.now())


@router.get("/{date}/group", summary="Get the group fulfillment of a date (null if not a group day).",
            response_model=Optional[GroupDayInfo], )
def get_group(date: datetime.date, db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return CalendarService(db).get_group_info(profile.id, date)
