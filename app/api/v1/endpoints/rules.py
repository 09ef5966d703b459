"""
Submission rule endpoints.

Deadlines, rest days and grouped-day requirements.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_path_profile
from app.db.session import get_db
from app.models.profile import Profile
from app.schemas.submission_rule import (GroupConfigResponse, GroupRuleCreate, RestDayRuleCreate,
                                         SubmissionRuleCreate, SubmissionRuleResponse, )
from app.services.submission_rule_service import SubmissionRuleService

router = APIRouter()


@router.get("", summary="List a user's rules (newest first).", response_model=list[SubmissionRuleResponse], )
def list_rules(db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return SubmissionRuleService(db).list_rules(profile.id)


@router.post("", summary="Add a deadline, target-day or rest-day rule.", response_model=SubmissionRuleResponse,
             status_code=status.HTTP_201_CREATED, )
def create_rule(data: SubmissionRuleCreate, db: Session = Depends(get_db),
                profile: Profile = Depends(get_path_profile), ):
    return SubmissionRuleService(db).create(profile.id, data)


@router.get("/groups", summary="List the user's day groups.", response_model=list[GroupConfigResponse], )
def list_groups(db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    return SubmissionRuleService(db).list_groups(profile.id)


@router.post("/groups", summary="Add a grouped-day requirement.", response_model=list[SubmissionRuleResponse],
             status_code=status.HTTP_201_CREATED, )
def create_group(data: GroupRuleCreate, db: Session = Depends(get_db),
                 profile: Profile = Depends(get_path_profile), ):
    return SubmissionRuleService(db).create_group(profile.id, data)


@router.post("/rest-days", summary="Add weekly rest days.", response_model=list[SubmissionRuleResponse],
             status_code=status.HTTP_201_CREATED, )
def create_rest_days(data: RestDayRuleCreate, db: Session = Depends(get_db),
                     profile: Profile = Depends(get_path_profile), ):
    return SubmissionRuleService(db).create_rest_days(profile.id, data)


@router.delete("/{rule_id}", summary="Delete a rule (a whole group for group rules).",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_rule(rule_id: int, db: Session = Depends(get_db), profile: Profile = Depends(get_path_profile)):
    SubmissionRuleService(db).delete(profile.id, rule_id)
