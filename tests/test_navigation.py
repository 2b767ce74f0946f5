from datetime import date

import pytest

import navigation
from calendar_logic import CalendarPeriod
from errors import InvalidArgumentError
from navigation import NavigationState


def test_defaults_to_today_period():
    nav = NavigationState(today=date(2016, 1, 30))
    assert nav.current() == CalendarPeriod(2016, 0)


def test_advance_rolls_year_over():
    nav = NavigationState(CalendarPeriod(2016, 11))
    assert nav.advance() == CalendarPeriod(2017, 0)
    assert nav.current() == CalendarPeriod(2017, 0)


def test_retreat_rolls_year_under():
    nav = NavigationState(CalendarPeriod(2016, 0))
    assert nav.retreat() == CalendarPeriod(2015, 11)


@pytest.mark.parametrize("month", range(12))
def test_round_trip(month):
    start = CalendarPeriod(2016, month)
    nav = NavigationState(start)
    nav.advance()
    assert nav.retreat() == start
    nav.retreat()
    assert nav.advance() == start


def test_jump_to_replaces_period():
    nav = NavigationState(CalendarPeriod(2016, 0))
    nav.jump_to(CalendarPeriod(1999, 6))
    assert nav.current() == CalendarPeriod(1999, 6)


def test_period_replaced_not_mutated():
    nav = NavigationState(CalendarPeriod(2016, 0))
    before = nav.current()
    nav.advance()
    assert before == CalendarPeriod(2016, 0)


def test_go_today():
    nav = NavigationState(CalendarPeriod(2000, 3), today=date(2016, 1, 30))
    assert nav.go_today() == CalendarPeriod(2016, 0)


def test_is_today_compares_day_of_month():
    # January 30th 2016 is a Saturday (ISO weekday 5)
    nav = NavigationState(today=date(2016, 1, 30))
    assert nav.is_today(30)
    assert not nav.is_today(5)
    assert not nav.is_today(None)
    nav.advance()
    assert not nav.is_today(30)


def test_instances_are_independent():
    a = NavigationState(CalendarPeriod(2016, 0))
    b = NavigationState(CalendarPeriod(2016, 0))
    a.advance()
    assert b.current() == CalendarPeriod(2016, 0)


class _FakeDate(date):
    current = date(2016, 1, 31)

    @classmethod
    def today(cls):
        return cls.current


def test_today_follows_the_clock(monkeypatch):
    monkeypatch.setattr(navigation, "date", _FakeDate)
    nav = NavigationState()
    assert nav.current() == CalendarPeriod(2016, 0)
    assert nav.is_today(31)

    monkeypatch.setattr(_FakeDate, "current", date(2016, 2, 1))
    nav.advance()
    assert nav.is_today(1)
    nav.retreat()
    assert not nav.is_today(31)
    assert nav.go_today() == CalendarPeriod(2016, 1)


def test_failed_retreat_keeps_period():
    nav = NavigationState(CalendarPeriod(1, 0))
    with pytest.raises(InvalidArgumentError):
        nav.retreat()
    assert nav.current() == CalendarPeriod(1, 0)
