"""
Submission rule resolution.

Rules are stored one row per (scope, weekday/date) and come in four
types:

- ``deadline``: ``value`` holds an ``HH:MM`` cut-off time,
- ``target_day``: legacy on/off flag, kept for old rows,
- ``rest_day``: the day needs no submission,
- ``group``: the day belongs to a grouped requirement; rows of the
  same group share ``group_id`` and ``group_required_count``.

Precedence when several rules of one type apply to a date is
**daily > weekly > monthly**; inside a scope the rule with the latest
``effective_from`` wins.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Protocol, Sequence

from loguru import logger

from app.tracking.deadlines import parse_deadline
from app.tracking.group_fulfillment import GroupConfig, format_group_label
from app.tracking.weekdays import day_of_week, monday_first_key, validate_day_of_week

RULE_DEADLINE = "deadline"
RULE_TARGET_DAY = "target_day"
RULE_REST_DAY = "rest_day"
RULE_GROUP = "group"

SCOPE_DAILY = "daily"
SCOPE_WEEKLY = "weekly"
SCOPE_MONTHLY = "monthly"

_SCOPE_PRECEDENCE = (SCOPE_DAILY, SCOPE_WEEKLY, SCOPE_MONTHLY)


class GroupValidationError(ValueError):
    """Raised when a new group or rest-day rule conflicts with existing ones."""


class RuleView(Protocol):
    rule_type: str
    scope: str
    day_of_week: Optional[int]
    specific_date: Optional[datetime.date]
    value: Optional[str]
    group_id: Optional[str]
    group_required_count: Optional[int]
    effective_from: datetime.date
    effective_to: Optional[datetime.date]


# ======================================================================
# Effectiveness
# ======================================================================


def is_rule_effective(rule: RuleView, date: datetime.date) -> bool:
    """Whether *date* lies in the rule's ``[effective_from, effective_to)``."""
    if date < rule.effective_from:
        return False
    return rule.effective_to is None or date < rule.effective_to


def _is_open(rule: RuleView, as_of: datetime.date) -> bool:
    """Rule is current or scheduled for the future."""
    return rule.effective_to is None or rule.effective_to > as_of


def _matches_date(rule: RuleView, date: datetime.date) -> bool:
    if rule.scope == SCOPE_DAILY:
        return rule.specific_date == date
    if rule.scope == SCOPE_WEEKLY:
        return rule.day_of_week == day_of_week(date)
    return rule.scope == SCOPE_MONTHLY


# ======================================================================
# Lookup
# ======================================================================


def get_rule_for_date(rules: Iterable[RuleView], date: datetime.date, rule_type: str) -> Optional[str]:
    """Return the ``value`` of the winning *rule_type* rule for *date*.

    Returns ``None`` when no effective rule applies.
    """
    candidates = [r for r in rules if r.rule_type == rule_type and is_rule_effective(r, date)]
    if not candidates:
        return None

    # Stable sort keeps the caller's order (newest first) for ties.
    candidates.sort(key=lambda r: r.effective_from, reverse=True)

    for scope in _SCOPE_PRECEDENCE:
        for rule in candidates:
            if rule.scope == scope and _matches_date(rule, date):
                return rule.value
    return None


def get_deadline_for_date(rules: Iterable[RuleView], date: datetime.date) -> Optional[datetime.time]:
    value = get_rule_for_date(rules, date, RULE_DEADLINE)
    return parse_deadline(value) if value else None


def is_deadline_passed(rules: Iterable[RuleView], target_date: datetime.date, now: datetime.datetime) -> bool:
    """Whether *now* is past the deadline of *target_date*.

    A date without a deadline rule is never overdue.
    """
    deadline = get_deadline_for_date(rules, target_date)
    if deadline is None:
        return False
    return now > datetime.datetime.combine(target_date, deadline)


def is_rest_day(rules: Iterable[RuleView], date: datetime.date) -> bool:
    for rule in rules:
        if rule.rule_type != RULE_REST_DAY or not is_rule_effective(rule, date):
            continue
        if rule.scope in (SCOPE_DAILY, SCOPE_WEEKLY) and _matches_date(rule, date):
            return True
    return False


# ======================================================================
# Groups
# ======================================================================


def build_group_configs(rules: Iterable[RuleView]) -> list[GroupConfig]:
    """Collapse ``group`` rule rows into one :class:`GroupConfig` per ``group_id``."""
    rows_by_group: dict[str, list[RuleView]] = {}
    for rule in rules:
        if rule.rule_type != RULE_GROUP or not rule.group_id:
            continue
        rows_by_group.setdefault(rule.group_id, []).append(rule)

    configs: list[GroupConfig] = []
    for group_id, rows in rows_by_group.items():
        required = rows[0].group_required_count
        days = sorted({r.day_of_week for r in rows if r.day_of_week is not None}, key=monday_first_key)
        if required is None or not days:
            logger.warning(f"Skipping incomplete group {group_id}: required={required}, days={days}")
            continue
        configs.append(GroupConfig(group_id=group_id, days_of_week=days, required_count=required,
                                   effective_from=min(r.effective_from for r in rows),
                                   effective_to=rows[0].effective_to, ))
    return configs


def _is_weekly_rest_day(rule: RuleView) -> bool:
    return rule.rule_type == RULE_REST_DAY and rule.scope == SCOPE_WEEKLY and rule.day_of_week is not None


def _weekly_rest_days(rules: Iterable[RuleView], as_of: datetime.date) -> set[int]:
    return {r.day_of_week for r in rules if _is_weekly_rest_day(r) and _is_open(r, as_of)}


def _group_days(rules: Iterable[RuleView], as_of: datetime.date) -> set[int]:
    open_groups = [g for g in build_group_configs(rules) if g.effective_to is None or g.effective_to > as_of]
    return {d for g in open_groups for d in g.days_of_week}


def _check_days(days: Iterable[int]) -> None:
    for dow in days:
        try:
            validate_day_of_week(dow)
        except ValueError as e:
            raise GroupValidationError(str(e)) from e


def _labels(days: Iterable[int]) -> str:
    return "、".join(format_group_label([d]) for d in sorted(days, key=monday_first_key))


def validate_new_group(days: Sequence[int], required_count: int, rules: Sequence[RuleView],
                       as_of: datetime.date, ) -> None:
    """Check that a new group can be added next to the existing *rules*.

    Raises:
        GroupValidationError: on any conflict.
    """
    _check_days(days)
    unique_days = set(days)
    if len(unique_days) < 2:
        raise GroupValidationError("A group needs at least two weekdays")
    if required_count < 1 or required_count >= len(unique_days):
        raise GroupValidationError("Required count must be at least 1 and less than the number of weekdays")

    overlap_rest = unique_days & _weekly_rest_days(rules, as_of)
    if overlap_rest:
        raise GroupValidationError(f"{_labels(overlap_rest)} already configured as rest days")

    overlap_group = unique_days & _group_days(rules, as_of)
    if overlap_group:
        raise GroupValidationError(f"{_labels(overlap_group)} already belong to another group")


def validate_new_rest_days(days: Sequence[int], rules: Sequence[RuleView], as_of: datetime.date) -> None:
    """Rest days may not overlap an existing group."""
    _check_days(days)
    if not days:
        raise GroupValidationError("Select at least one weekday")
    overlap = set(days) & _group_days(rules, as_of)
    if overlap:
        raise GroupValidationError(f"{_labels(overlap)} overlap an existing group")


def target_days_per_week(rules: Sequence[RuleView], as_of: datetime.date) -> int:
    """Number of submissions expected in a regular week.

    Every weekday counts once, except weekly rest days (zero) and group
    days (replaced by each group's required count).
    """
    rest_days = {r.day_of_week for r in rules if _is_weekly_rest_day(r) and is_rule_effective(r, as_of)}
    groups = [g for g in build_group_configs(rules) if g.is_active_on(as_of)]
    group_days = {d for g in groups for d in g.days_of_week}
    plain_days = 7 - len(rest_days | group_days)
    return plain_days + sum(g.required_count for g in groups)
