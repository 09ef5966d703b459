"""
Submission rule service.

Creates and removes rules and answers per-date questions (winning rule,
deadline, rest day, groups) by delegating to :mod:`app.tracking.rules`.
Group and rest-day requests expand into one row per weekday.
"""

import datetime
import uuid
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.submission_rule import SubmissionRuleRepository
from app.models.submission_rule import SubmissionRule
from app.schemas.submission_rule import (GroupConfigResponse, GroupRuleCreate, RestDayRuleCreate,
                                         SubmissionRuleCreate, )
from app.services.profile_service import ProfileService
from app.tracking.group_fulfillment import GroupConfig, format_group_label
from app.tracking.rules import (RULE_GROUP, RULE_REST_DAY, SCOPE_WEEKLY, GroupValidationError, build_group_configs,
                                get_rule_for_date, is_deadline_passed, validate_new_group, validate_new_rest_days, )


class SubmissionRuleService:
    """Service for submission rule business logic."""

    def __init__(self, session: Session):
        self.repository = SubmissionRuleRepository(session)
        self.profiles = ProfileService(session)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_rules(self, user_id: str) -> list[SubmissionRule]:
        return self.repository.get_all_by_user(user_id)

    def get_group_configs(self, user_id: str) -> list[GroupConfig]:
        return build_group_configs(self.list_rules(user_id))

    def list_groups(self, user_id: str) -> list[GroupConfigResponse]:
        return [GroupConfigResponse(group_id=g.group_id, label=format_group_label(g.days_of_week),
                                    days_of_week=g.days_of_week, required_count=g.required_count,
                                    effective_from=g.effective_from, effective_to=g.effective_to, ) for g in
                self.get_group_configs(user_id)]

    def get_rule_for_date(self, user_id: str, date: datetime.date, rule_type: str) -> Optional[str]:
        return get_rule_for_date(self.list_rules(user_id), date, rule_type)

    def is_deadline_passed(self, user_id: str, target_date: datetime.date, now: datetime.datetime) -> bool:
        try:
            return is_deadline_passed(self.list_rules(user_id), target_date, now)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create(self, user_id: str, data: SubmissionRuleCreate) -> SubmissionRule:
        self.profiles.get(user_id)
        rule = SubmissionRule(user_id=user_id, rule_type=data.rule_type, scope=data.scope,
                              day_of_week=data.day_of_week if data.scope == SCOPE_WEEKLY else None,
                              specific_date=data.specific_date if data.scope == "daily" else None, value=data.value,
                              effective_from=data.effective_from or datetime.date.today(), )
        return self.repository.create(rule)

    def create_group(self, user_id: str, data: GroupRuleCreate) -> list[SubmissionRule]:
        self.profiles.get(user_id)
        effective_from = data.effective_from or datetime.date.today()
        existing = self.list_rules(user_id)
        try:
            validate_new_group(data.days_of_week, data.required_count, existing, as_of=effective_from)
        except GroupValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        group_id = str(uuid.uuid4())
        rows = [SubmissionRule(user_id=user_id, rule_type=RULE_GROUP, scope=SCOPE_WEEKLY, day_of_week=day,
                               group_id=group_id, group_required_count=data.required_count,
                               effective_from=effective_from, ) for day in sorted(set(data.days_of_week))]
        rows = self.repository.create_many(rows)
        logger.info(f"Created group {format_group_label(data.days_of_week)} "
                    f"(required={data.required_count}) for {user_id}")
        return rows

    def create_rest_days(self, user_id: str, data: RestDayRuleCreate) -> list[SubmissionRule]:
        self.profiles.get(user_id)
        effective_from = data.effective_from or datetime.date.today()
        try:
            validate_new_rest_days(data.days_of_week, self.list_rules(user_id), as_of=effective_from)
        except GroupValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        rows = [SubmissionRule(user_id=user_id, rule_type=RULE_REST_DAY, scope=SCOPE_WEEKLY, day_of_week=day,
                               effective_from=effective_from, ) for day in sorted(set(data.days_of_week))]
        return self.repository.create_many(rows)

    def delete(self, user_id: str, rule_id: int) -> None:
        """Delete a rule; deleting any row of a group removes the whole group."""
        rule = self.repository.get_by_id(rule_id)
        if not rule or rule.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission rule not found", )
        if rule.group_id:
            removed = self.repository.delete_group(user_id, rule.group_id)
            logger.info(f"Deleted group {rule.group_id} ({removed} rows) of {user_id}")
            return
        self.repository.delete(rule_id)
