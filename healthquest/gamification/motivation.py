"""Daily motivational quote"""
from datetime import date
from typing import Optional

from healthquest.utils.datetime_helpers import today_in_timezone

QUOTES = (
    "Discipline beats motivation.",
    "You don’t need to be extreme. Just consistent.",
    "Your future body is watching you today.",
    "Every workout is a vote for the person you want to become.",
    "Progress, not perfection.",
    "You’re one decision away from a better life.",
    "Small steps every day. Big results over time.",
    "You showed up. That’s the win.",
    "Make today count.",
)


def get_daily_quote(day: Optional[date] = None) -> str:
    """
    Same quote for everyone on a given day of the month

    day defaults to today in config.DEFAULT_TIMEZONE.
    """
    day = day or today_in_timezone()
    return QUOTES[day.day % len(QUOTES)]
