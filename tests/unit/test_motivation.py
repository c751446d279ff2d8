"""Unit tests for daily quotes (healthquest/gamification/motivation.py)"""
from datetime import date

from healthquest.gamification import motivation
from healthquest.gamification.motivation import QUOTES, get_daily_quote


def test_quote_by_day_of_month():
    assert get_daily_quote(date(2024, 2, 1)) == QUOTES[1]
    assert get_daily_quote(date(2024, 2, 9)) == QUOTES[0]


def test_same_quote_for_same_day_of_month():
    assert get_daily_quote(date(2024, 1, 15)) == get_daily_quote(date(2024, 3, 15))


def test_default_day_is_today_in_configured_timezone(monkeypatch):
    monkeypatch.setattr(motivation, "today_in_timezone", lambda: date(2024, 2, 3))

    assert get_daily_quote() == QUOTES[3]
