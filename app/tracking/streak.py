"""
Streak computation.

The streak is computed on demand from approved submissions and the
rest-day configuration:

- walk backwards from ``today`` over a bounded lookback window,
- rest days are skipped (they neither extend nor break the streak),
- group days without a post are skipped once other days of the same
  group have met its weekly requirement,
- an approved day (status ``success``) extends the streak,
- a day without approval consumes one shield if any are left,
  otherwise the streak ends.

Every 7 consecutive *straight* days (approved, no shield, not a
revival) counts as one perfect week.  Using a shield or a revival
resets the straight run.
"""

from __future__ import annotations

import datetime
from typing import Callable, Iterable, Optional, Protocol

from pydantic import BaseModel, Field

SUCCESS_STATUS = "success"
DEFAULT_LOOKBACK_DAYS = 90
DEFAULT_SHIELD_STOCK_MAX = 3
PERFECT_WEEK_DAYS = 7

DatePredicate = Callable[[datetime.date], bool]
IsRestDayFn = DatePredicate


class StreakSubmission(Protocol):
    target_date: Optional[datetime.date]
    status: Optional[str]
    is_revival: bool


class StreakResult(BaseModel):
    """Outcome of :func:`calculate_streak`."""

    current_streak: int = 0
    started_on: Optional[datetime.date] = None
    shield_days: list[datetime.date] = Field(default_factory=list)
    revival_days: list[datetime.date] = Field(default_factory=list)
    perfect_week_count: int = 0
    shields_consumed: int = 0


def _approved_dates(submissions: Iterable[StreakSubmission]) -> set[datetime.date]:
    return {s.target_date for s in submissions if s.target_date is not None and s.status == SUCCESS_STATUS}


def _revival_dates(submissions: Iterable[StreakSubmission]) -> set[datetime.date]:
    return {s.target_date for s in submissions if
            s.target_date is not None and s.status == SUCCESS_STATUS and s.is_revival}


def calculate_streak(submissions: Iterable[StreakSubmission], is_rest_day: IsRestDayFn, shield_stock: int,
                     today: datetime.date, effective_from: Optional[datetime.date] = None,
                     lookback_days: int = DEFAULT_LOOKBACK_DAYS,
                     is_group_fulfilled: Optional[DatePredicate] = None, ) -> StreakResult:
    """Compute the current streak ending on *today*.

    Args:
        submissions: All submissions of the user.
        is_rest_day: Predicate for rest days.
        shield_stock: Shields available to protect missing days.
        today: Last day of the walk.
        effective_from: Days before this date are never counted.
        lookback_days: Size of the backwards window.
        is_group_fulfilled: Predicate for group days already covered by
            other posts of the same week.

    Returns:
        :class:`StreakResult`.
    """
    submissions = list(submissions)
    approved = _approved_dates(submissions)
    revivals = _revival_dates(submissions)

    streak = 0
    started_on: Optional[datetime.date] = None
    shields_remaining = shield_stock
    shield_days: list[datetime.date] = []
    perfect_weeks = 0
    straight_run = 0

    for offset in range(lookback_days + 1):
        day = today - datetime.timedelta(days=offset)

        if effective_from is not None and day < effective_from:
            break
        if is_rest_day(day):
            continue

        if day in approved:
            streak += 1
            started_on = day
            if day in revivals:
                straight_run = 0
            else:
                straight_run += 1
                if straight_run % PERFECT_WEEK_DAYS == 0:
                    perfect_weeks += 1
        elif is_group_fulfilled is not None and is_group_fulfilled(day):
            continue
        elif shields_remaining > 0:
            shield_days.append(day)
            shields_remaining -= 1
            streak += 1
            started_on = day
            straight_run = 0
        else:
            break

    return StreakResult(current_streak=streak, started_on=started_on, shield_days=shield_days,
                        revival_days=sorted(revivals), perfect_week_count=perfect_weeks,
                        shields_consumed=shield_stock - shields_remaining, )


def is_revival_candidate(target_date: datetime.date, submissions: Iterable[StreakSubmission],
                         is_rest_day: IsRestDayFn, today: datetime.date, ) -> bool:
    """Whether a submission for *target_date* would revive a missed day.

    Only past, non-rest days without an approved submission qualify.
    """
    if target_date >= today:
        return False
    if is_rest_day(target_date):
        return False
    return target_date not in _approved_dates(submissions)


def calculate_shield_reward(current_streak: int, shield_stock: int, used_shield_or_revival: bool,
                            max_stock: int = DEFAULT_SHIELD_STOCK_MAX, ) -> int:
    """Shields earned now: 1 per completed straight week, capped at *max_stock*."""
    if used_shield_or_revival:
        return 0
    if current_streak > 0 and current_streak % PERFECT_WEEK_DAYS == 0 and shield_stock < max_stock:
        return 1
    return 0
