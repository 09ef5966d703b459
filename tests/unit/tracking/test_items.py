"""Tests for item selection and the submission window."""

import datetime
from types import SimpleNamespace

import pytest

from app.tracking.items import (
    build_item_selection,
    effective_items,
    is_item_effective,
    is_within_submission_window,
    pending_items,
)

TODAY = datetime.date(2026, 10, 19)
START = datetime.date(2026, 10, 1)


def _item(item_id, name, effective_from=START, effective_to=None):
    return SimpleNamespace(id=item_id, name=name, effective_from=effective_from, effective_to=effective_to)


def _submission(item_id, date=TODAY):
    return SimpleNamespace(target_date=date, submission_item_id=item_id)


@pytest.fixture
def items():
    return [
        _item(1, "Squats"),
        _item(2, "Run", effective_to=TODAY),
        _item(3, "Plank", effective_from=TODAY + datetime.timedelta(days=1)),
    ]


def test_is_item_effective_half_open():
    item = _item(1, "Squats", effective_from=TODAY, effective_to=TODAY + datetime.timedelta(days=2))
    assert is_item_effective(item, TODAY)
    assert is_item_effective(item, TODAY + datetime.timedelta(days=1))
    assert not is_item_effective(item, TODAY + datetime.timedelta(days=2))
    assert not is_item_effective(item, TODAY - datetime.timedelta(days=1))


def test_effective_items_keeps_order(items):
    yesterday = TODAY - datetime.timedelta(days=1)
    assert [i.id for i in effective_items(items, yesterday)] == [1, 2]
    assert [i.id for i in effective_items(items, TODAY)] == [1]


def test_build_item_selection_marks_completed(items):
    yesterday = TODAY - datetime.timedelta(days=1)
    options = build_item_selection(items, [_submission(2, yesterday), _submission(1)], yesterday)
    assert [(o.item_id, o.name, o.is_completed) for o in options] == [(1, "Squats", False), (2, "Run", True)]


def test_build_item_selection_ignores_unlinked_submissions(items):
    options = build_item_selection(items, [_submission(None)], TODAY)
    assert [o.is_completed for o in options] == [False]


@pytest.mark.parametrize(
    "offset, expected",
    [(0, True), (-7, True), (-8, False), (3, True), (4, False)],
)
def test_submission_window(offset, expected):
    date = TODAY + datetime.timedelta(days=offset)
    assert is_within_submission_window(date, TODAY, past_days=7, future_days=3) is expected


def test_today_is_open_even_with_zero_window():
    assert is_within_submission_window(TODAY, TODAY, past_days=0, future_days=0)


def test_pending_items(items):
    pending = pending_items(items, [], TODAY, TODAY, past_days=7, future_days=7)
    assert [i.id for i in pending] == [1]
    assert pending_items(items, [_submission(1)], TODAY, TODAY, past_days=7, future_days=7) == []


def test_nothing_pending_on_rest_day(items):
    assert pending_items(items, [], TODAY, TODAY, past_days=7, future_days=7, rest_day=True) == []


def test_nothing_pending_outside_window(items):
    old = TODAY - datetime.timedelta(days=10)
    assert pending_items(items, [], old, TODAY, past_days=7, future_days=7) == []
