"""Tests for SubmissionRuleService."""

import datetime

import pytest
from fastapi import HTTPException

from app.models.submission_rule import SubmissionRule
from app.schemas.submission_rule import GroupRuleCreate, RestDayRuleCreate, SubmissionRuleCreate
from app.services.submission_rule_service import SubmissionRuleService

START = datetime.date(2026, 10, 1)
MON = datetime.date(2026, 10, 19)


@pytest.fixture
def service(session):
    return SubmissionRuleService(session)


def _weekend_group(service, user_id):
    return service.create_group(user_id, GroupRuleCreate(days_of_week=[0, 6], required_count=1, effective_from=START))


def test_create_group_writes_one_row_per_day(service, profile):
    rows = _weekend_group(service, profile.id)
    assert sorted(r.day_of_week for r in rows) == [0, 6]
    assert len({r.group_id for r in rows}) == 1
    assert all(r.group_required_count == 1 for r in rows)


def test_list_groups(service, profile):
    _weekend_group(service, profile.id)
    groups = service.list_groups(profile.id)
    assert len(groups) == 1
    assert groups[0].label == "土日"
    assert groups[0].days_of_week == [6, 0]


def test_group_overlapping_rest_day_is_rejected(service, profile):
    service.create_rest_days(profile.id, RestDayRuleCreate(days_of_week=[0], effective_from=START))
    with pytest.raises(HTTPException) as exc:
        _weekend_group(service, profile.id)
    assert exc.value.status_code == 400


def test_group_overlapping_group_is_rejected(service, profile):
    _weekend_group(service, profile.id)
    with pytest.raises(HTTPException) as exc:
        service.create_group(profile.id, GroupRuleCreate(days_of_week=[5, 6], required_count=1, effective_from=START))
    assert exc.value.status_code == 400


def test_rest_day_overlapping_group_is_rejected(service, profile):
    _weekend_group(service, profile.id)
    with pytest.raises(HTTPException) as exc:
        service.create_rest_days(profile.id, RestDayRuleCreate(days_of_week=[6], effective_from=START))
    assert exc.value.status_code == 400


def test_deleting_one_row_removes_the_whole_group(service, profile):
    rows = _weekend_group(service, profile.id)
    service.delete(profile.id, rows[0].id)
    assert service.list_rules(profile.id) == []


def test_delete_other_users_rule(service, profile, admin):
    rows = _weekend_group(service, admin.id)
    with pytest.raises(HTTPException) as exc:
        service.delete(profile.id, rows[0].id)
    assert exc.value.status_code == 404


def test_deadline_lookup(service, profile):
    service.create(profile.id, SubmissionRuleCreate(rule_type="deadline", scope="monthly", value="20:00",
                                                    effective_from=START))
    service.create(profile.id, SubmissionRuleCreate(rule_type="deadline", scope="weekly", day_of_week=1,
                                                    value="19:00", effective_from=START))
    assert service.get_rule_for_date(profile.id, MON, "deadline") == "19:00"
    assert service.is_deadline_passed(profile.id, MON, datetime.datetime(2026, 10, 19, 19, 30))
    assert not service.is_deadline_passed(profile.id, MON + datetime.timedelta(days=1),
                                          datetime.datetime(2026, 10, 20, 19, 30))


def test_malformed_stored_deadline_is_422(session, service, profile):
    session.add(SubmissionRule(user_id=profile.id, rule_type="deadline", scope="monthly", value="late",
                               effective_from=START))
    session.commit()
    with pytest.raises(HTTPException) as exc:
        service.is_deadline_passed(profile.id, MON, datetime.datetime(2026, 10, 19, 12, 0))
    assert exc.value.status_code == 422
