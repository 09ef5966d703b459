"""Tests for submission rule resolution and group/rest-day validation."""

import datetime

import pytest

from app.models.submission_rule import SubmissionRule
from app.tracking.rules import (
    GroupValidationError,
    build_group_configs,
    get_rule_for_date,
    is_deadline_passed,
    is_rest_day,
    is_rule_effective,
    target_days_per_week,
    validate_new_group,
    validate_new_rest_days,
)

START = datetime.date(2026, 10, 1)
MON = datetime.date(2026, 10, 19)
TUE = datetime.date(2026, 10, 20)
SUN = datetime.date(2026, 10, 25)
NEXT_MON = datetime.date(2026, 10, 26)


def _rule(rule_type, scope="weekly", day_of_week=None, specific_date=None, value=None, group_id=None,
          group_required_count=None, effective_from=START, effective_to=None):
    return SubmissionRule(user_id="u1", rule_type=rule_type, scope=scope, day_of_week=day_of_week,
                          specific_date=specific_date, value=value, group_id=group_id,
                          group_required_count=group_required_count, effective_from=effective_from,
                          effective_to=effective_to)


def _group(group_id, days, required, **kwargs):
    return [_rule("group", day_of_week=d, group_id=group_id, group_required_count=required, **kwargs) for d in days]


# ======================================================================
# Effectiveness
# ======================================================================


class TestIsRuleEffective:
    def test_half_open_range(self):
        rule = _rule("rest_day", day_of_week=0, effective_from=MON, effective_to=SUN)
        assert is_rule_effective(rule, MON)
        assert is_rule_effective(rule, SUN - datetime.timedelta(days=1))
        assert not is_rule_effective(rule, SUN)
        assert not is_rule_effective(rule, MON - datetime.timedelta(days=1))


# ======================================================================
# Rule lookup
# ======================================================================


class TestGetRuleForDate:
    @pytest.fixture
    def deadlines(self):
        return [
            _rule("deadline", scope="monthly", value="20:00"),
            _rule("deadline", scope="weekly", day_of_week=1, value="19:00"),
            _rule("deadline", scope="daily", specific_date=MON, value="18:00"),
        ]

    def test_daily_beats_weekly(self, deadlines):
        assert get_rule_for_date(deadlines, MON, "deadline") == "18:00"

    def test_weekly_beats_monthly(self, deadlines):
        assert get_rule_for_date(deadlines, NEXT_MON, "deadline") == "19:00"

    def test_monthly_is_the_fallback(self, deadlines):
        assert get_rule_for_date(deadlines, TUE, "deadline") == "20:00"

    def test_other_rule_types_are_ignored(self, deadlines):
        assert get_rule_for_date(deadlines, MON, "target_day") is None

    def test_rule_not_yet_effective_is_ignored(self):
        rules = [_rule("deadline", scope="monthly", value="20:00", effective_from=TUE)]
        assert get_rule_for_date(rules, MON, "deadline") is None
        assert get_rule_for_date(rules, TUE, "deadline") == "20:00"

    def test_latest_effective_from_wins_within_scope(self):
        rules = [
            _rule("deadline", scope="monthly", value="20:00", effective_from=START),
            _rule("deadline", scope="monthly", value="21:00", effective_from=MON),
        ]
        assert get_rule_for_date(rules, TUE, "deadline") == "21:00"
        assert get_rule_for_date(rules, START, "deadline") == "20:00"


class TestIsDeadlinePassed:
    @pytest.fixture
    def rules(self):
        return [_rule("deadline", scope="monthly", value="19:00")]

    def test_after_deadline(self, rules):
        assert is_deadline_passed(rules, MON, datetime.datetime(2026, 10, 19, 19, 1))

    def test_before_deadline(self, rules):
        assert not is_deadline_passed(rules, MON, datetime.datetime(2026, 10, 19, 18, 59))

    def test_exactly_at_deadline_is_not_passed(self, rules):
        assert not is_deadline_passed(rules, MON, datetime.datetime(2026, 10, 19, 19, 0))

    def test_no_deadline_never_passes(self):
        assert not is_deadline_passed([], MON, datetime.datetime(2030, 1, 1))

    def test_malformed_value_raises(self):
        rules = [_rule("deadline", scope="monthly", value="7pm")]
        with pytest.raises(ValueError):
            is_deadline_passed(rules, MON, datetime.datetime(2026, 10, 19, 20, 0))


class TestIsRestDay:
    def test_weekly_rest_day(self):
        rules = [_rule("rest_day", day_of_week=0)]
        assert is_rest_day(rules, SUN)
        assert not is_rest_day(rules, MON)

    def test_daily_rest_day(self):
        rules = [_rule("rest_day", scope="daily", specific_date=TUE)]
        assert is_rest_day(rules, TUE)
        assert not is_rest_day(rules, MON)

    def test_ended_rest_day(self):
        rules = [_rule("rest_day", day_of_week=0, effective_to=SUN)]
        assert not is_rest_day(rules, SUN)


# ======================================================================
# Groups
# ======================================================================


class TestBuildGroupConfigs:
    def test_rows_collapse_by_group_id(self):
        rules = _group("g1", [6, 0], 1) + _group("g2", [5, 1, 3], 2) + [_rule("rest_day", day_of_week=2)]
        configs = build_group_configs(rules)
        assert [c.group_id for c in configs] == ["g1", "g2"]
        assert configs[0].days_of_week == [6, 0]
        assert configs[0].required_count == 1
        assert configs[1].days_of_week == [1, 3, 5]
        assert configs[1].required_count == 2

    def test_group_without_required_count_is_skipped(self):
        rules = _group("g1", [6, 0], None)
        assert build_group_configs(rules) == []

    def test_effective_range_is_carried(self):
        rules = _group("g1", [6, 0], 1, effective_from=MON, effective_to=NEXT_MON)
        config = build_group_configs(rules)[0]
        assert config.effective_from == MON
        assert config.effective_to == NEXT_MON


class TestValidateNewGroup:
    def test_valid_group(self):
        validate_new_group([6, 0], 1, [], as_of=MON)

    def test_needs_two_days(self):
        with pytest.raises(GroupValidationError):
            validate_new_group([6], 1, [], as_of=MON)

    def test_duplicate_days_do_not_count_twice(self):
        with pytest.raises(GroupValidationError):
            validate_new_group([6, 6], 1, [], as_of=MON)

    @pytest.mark.parametrize("required", [0, 2, 3])
    def test_required_count_bounds(self, required):
        with pytest.raises(GroupValidationError):
            validate_new_group([6, 0], required, [], as_of=MON)

    def test_overlap_with_rest_day(self):
        rules = [_rule("rest_day", day_of_week=0)]
        with pytest.raises(GroupValidationError, match="rest days"):
            validate_new_group([6, 0], 1, rules, as_of=MON)

    def test_overlap_with_existing_group(self):
        rules = _group("g1", [5, 6], 1)
        with pytest.raises(GroupValidationError, match="another group"):
            validate_new_group([6, 0], 1, rules, as_of=MON)

    def test_ended_group_does_not_block(self):
        rules = _group("g1", [5, 6], 1, effective_to=MON)
        validate_new_group([6, 0], 1, rules, as_of=MON)

    def test_invalid_weekday(self):
        with pytest.raises(GroupValidationError):
            validate_new_group([6, 9], 1, [], as_of=MON)


class TestValidateNewRestDays:
    def test_overlap_with_group(self):
        rules = _group("g1", [6, 0], 1)
        with pytest.raises(GroupValidationError):
            validate_new_rest_days([0], rules, as_of=MON)

    def test_empty_selection(self):
        with pytest.raises(GroupValidationError):
            validate_new_rest_days([], [], as_of=MON)

    def test_valid(self):
        validate_new_rest_days([2], _group("g1", [6, 0], 1), as_of=MON)


class TestTargetDaysPerWeek:
    def test_no_rules(self):
        assert target_days_per_week([], MON) == 7

    def test_rest_day_and_group(self):
        rules = [_rule("rest_day", day_of_week=0)] + _group("g1", [1, 3, 5], 2)
        # Tue, Thu, Sat + 2 of Mon/Wed/Fri
        assert target_days_per_week(rules, MON) == 5
