"""Tests for group fulfillment on the calendar.

The reference week runs Monday 2026-10-19 to Sunday 2026-10-25.
"""

import datetime
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from app.tracking.group_fulfillment import (
    GroupConfig,
    format_group_label,
    get_group_info_for_date,
    is_group_fulfilled_for_date,
)

MON = datetime.date(2026, 10, 19)
WED = datetime.date(2026, 10, 21)
FRI = datetime.date(2026, 10, 23)
SAT = datetime.date(2026, 10, 24)
SUN = datetime.date(2026, 10, 25)
NEXT_SAT = datetime.date(2026, 10, 31)


# ======================================================================
# Helpers
# ======================================================================


def _sub(date, status="success"):
    return SimpleNamespace(target_date=date, status=status)


def _weekend(required=1, effective_from=datetime.date(2026, 10, 1), effective_to=None):
    return GroupConfig(group_id="weekend", days_of_week=[6, 0], required_count=required,
                       effective_from=effective_from, effective_to=effective_to)


def _mon_wed_fri(required=2):
    return GroupConfig(group_id="mwf", days_of_week=[5, 1, 3], required_count=required,
                       effective_from=datetime.date(2026, 10, 1))


# ======================================================================
# Labels
# ======================================================================


class TestFormatGroupLabel:
    @pytest.mark.parametrize(
        "days, expected",
        [
            ([6, 0], "土日"),
            ([0, 6], "土日"),
            ([5, 1, 3], "月水金"),
            ([0, 1, 2, 3, 4, 5, 6], "月火水木金土日"),
        ],
    )
    def test_monday_first_order(self, days, expected):
        assert format_group_label(days) == expected


# ======================================================================
# Group matching
# ======================================================================


class TestGroupMatching:
    def test_non_group_day_returns_none(self):
        assert get_group_info_for_date(MON, [_weekend()], []) is None

    def test_no_groups_returns_none(self):
        assert get_group_info_for_date(SAT, [], [_sub(SAT)]) is None

    def test_before_effective_from_returns_none(self):
        group = _weekend(effective_from=datetime.date(2026, 10, 25))
        assert get_group_info_for_date(SAT, [group], []) is None

    def test_effective_to_is_exclusive(self):
        group = _weekend(effective_to=SUN)
        assert get_group_info_for_date(SUN, [group], []) is None
        assert get_group_info_for_date(SAT, [group], []) is not None

    def test_overlapping_groups_are_ambiguous(self):
        other = GroupConfig(group_id="fri-sat", days_of_week=[5, 6], required_count=1,
                            effective_from=datetime.date(2026, 10, 1))
        assert get_group_info_for_date(SAT, [_weekend(), other], []) is None

    def test_expired_group_does_not_make_later_one_ambiguous(self):
        old = _weekend(effective_to=datetime.date(2026, 10, 10))
        new = _weekend(required=2, effective_from=datetime.date(2026, 10, 10))
        info = get_group_info_for_date(SAT, [old, new], [])
        assert info is not None
        assert info.required_count == 2


# ======================================================================
# Weekly counting and fulfillment
# ======================================================================


class TestFulfillment:
    def test_other_weekend_day_posted_fulfills_sunday(self):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(SAT)])
        assert info.group_label == "土日"
        assert info.required_count == 1
        assert info.posted_days_count == 1
        assert info.is_fulfilled is True

    def test_day_with_its_own_post_is_not_fulfilled(self):
        info = get_group_info_for_date(SAT, [_weekend()], [_sub(SAT)])
        assert info.posted_days_count == 1
        assert info.is_fulfilled is False

    def test_failed_submission_does_not_count(self):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(SAT, "fail")])
        assert info.posted_days_count == 0
        assert info.is_fulfilled is False

    @pytest.mark.parametrize("status", [None, "success", "excused"])
    def test_non_fail_statuses_count(self, status):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(SAT, status)])
        assert info.posted_days_count == 1

    def test_failed_post_on_the_day_itself_leaves_it_fulfillable(self):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(SAT), _sub(SUN, "fail")])
        assert info.is_fulfilled is True

    def test_posts_from_next_week_do_not_count(self):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(NEXT_SAT)])
        assert info.posted_days_count == 0
        assert info.is_fulfilled is False

    def test_duplicate_posts_count_once(self):
        info = get_group_info_for_date(SUN, [_weekend(required=2)], [_sub(SAT), _sub(SAT)])
        assert info.posted_days_count == 1
        assert info.is_fulfilled is False

    def test_required_two_of_three(self):
        groups = [_mon_wed_fri(required=2)]
        info = get_group_info_for_date(FRI, groups, [_sub(MON), _sub(WED)])
        assert info.group_label == "月水金"
        assert info.posted_days_count == 2
        assert info.is_fulfilled is True

        partial = get_group_info_for_date(FRI, groups, [_sub(MON)])
        assert partial.is_fulfilled is False

    def test_days_before_effective_from_are_not_counted(self):
        group = _weekend(effective_from=SUN)
        info = get_group_info_for_date(SUN, [group], [_sub(SAT)])
        assert info.posted_days_count == 0
        assert info.is_fulfilled is False

    def test_days_on_or_after_effective_to_are_not_counted(self):
        group = _mon_wed_fri(required=1).model_copy(update={"effective_to": FRI})
        info = get_group_info_for_date(MON, [group], [_sub(FRI)])
        assert info.posted_days_count == 0

    def test_submissions_without_target_date_are_ignored(self):
        info = get_group_info_for_date(SUN, [_weekend()], [_sub(None)])
        assert info.posted_days_count == 0


class TestIsGroupFulfilledForDate:
    def test_fulfilled(self):
        assert is_group_fulfilled_for_date(SUN, [_weekend()], [_sub(SAT)]) is True

    def test_not_a_group_day(self):
        assert is_group_fulfilled_for_date(MON, [_weekend()], [_sub(SAT)]) is False


class TestGroupConfigValidation:
    def test_rejects_invalid_weekday(self):
        with pytest.raises(ValidationError):
            GroupConfig(days_of_week=[7], required_count=1, effective_from=MON)

    def test_rejects_zero_required(self):
        with pytest.raises(ValidationError):
            GroupConfig(days_of_week=[0, 6], required_count=0, effective_from=MON)
