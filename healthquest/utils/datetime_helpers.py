"""
Calendar and Week Utilities

Pure date arithmetic shared by scoring and gamification:
1. ISO date formatting and strict parsing
2. Monday-start weeks (Mon=1 ... Sun=7)
3. Inclusive date-range enumeration

CRITICAL RULES:
- Dates are calendar days in the caller's local calendar, never datetimes
- Malformed date strings raise InvalidInputError; nothing is coerced
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union
import pytz

from healthquest import config
from healthquest.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

DateLike = Union[date, str]

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """
    Parse a strict YYYY-MM-DD string

    Raises:
        InvalidInputError: If value is not a zero-padded ISO calendar date
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise InvalidInputError(
            f"Invalid date format '{value}'. Expected YYYY-MM-DD",
            field="date",
            value=value,
        )
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidInputError(
            f"Invalid calendar date '{value}'",
            field="date",
            value=value,
            cause=e,
        )


def to_date(value: DateLike) -> date:
    """Normalize a date or ISO string to a date"""
    # datetime is a date subclass; a timestamp is not a calendar day
    if isinstance(value, datetime):
        raise InvalidInputError(
            "Expected a calendar date, got a datetime",
            field="date",
            value=value.isoformat(),
        )
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def iso_date(value: DateLike) -> str:
    """Format as zero-padded YYYY-MM-DD"""
    d = to_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def add_days(value: DateLike, delta: int) -> date:
    return to_date(value) + timedelta(days=delta)


def is_same_day(a: Optional[DateLike], b: Optional[DateLike]) -> bool:
    """False when either side is missing"""
    if a is None or b is None:
        return False
    return to_date(a) == to_date(b)


def week_start_monday(value: DateLike) -> date:
    """Monday on or before the given date"""
    d = to_date(value)
    return d - timedelta(days=d.weekday())


def day_index_in_week(value: DateLike) -> int:
    """Monday=1 ... Sunday=7"""
    return to_date(value).weekday() + 1


def enumerate_dates_inclusive(start: DateLike, end: DateLike) -> Iterator[date]:
    """
    Lazily yield every date from start to end, ascending

    Yields nothing if start is after end.
    """
    current = to_date(start)
    last = to_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def today_in_timezone(tz_name: Optional[str] = None) -> date:
    """
    Today's calendar date in the given timezone

    Args:
        tz_name: IANA timezone name (defaults to config.DEFAULT_TIMEZONE)
    """
    tz_name = tz_name or config.DEFAULT_TIMEZONE
    try:
        tz = pytz.timezone(tz_name)
    except pytz.exceptions.UnknownTimeZoneError as e:
        raise InvalidInputError(
            f"Unknown timezone '{tz_name}'",
            field="timezone",
            value=tz_name,
            cause=e,
        )
    return datetime.now(tz).date()
