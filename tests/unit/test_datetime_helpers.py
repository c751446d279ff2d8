"""Unit tests for Calendar/Week Utilities (healthquest/utils/datetime_helpers.py)"""
import pytest
from datetime import date, datetime
from types import GeneratorType

from healthquest.exceptions import InvalidInputError
from healthquest.utils.datetime_helpers import (
    add_days,
    day_index_in_week,
    enumerate_dates_inclusive,
    is_same_day,
    iso_date,
    parse_iso_date,
    today_in_timezone,
    week_start_monday,
)


# ============================================================================
# ISO Formatting & Parsing Tests
# ============================================================================

def test_iso_date_zero_pads():
    """Test month and day are zero padded"""
    assert iso_date(date(2024, 1, 5)) == "2024-01-05"
    assert iso_date(date(999, 12, 31)) == "0999-12-31"


def test_iso_date_accepts_string():
    assert iso_date("2024-03-09") == "2024-03-09"


def test_parse_iso_date_valid():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("bad", ["2024-1-5", "01/05/2024", "2024-02-30", "", "2024-01-05T00:00:00", "yesterday"])
def test_parse_iso_date_rejects_malformed(bad):
    """Test malformed dates fail fast instead of being coerced"""
    with pytest.raises(InvalidInputError) as exc_info:
        parse_iso_date(bad)

    assert exc_info.value.field == "date"


def test_datetime_is_not_a_calendar_day():
    with pytest.raises(InvalidInputError):
        iso_date(datetime(2024, 1, 1, 12, 0))


# ============================================================================
# Week Arithmetic Tests
# ============================================================================

def test_week_start_monday_midweek():
    """Test Wednesday maps back to Monday"""
    assert week_start_monday("2024-01-10") == date(2024, 1, 8)


def test_week_start_monday_on_monday():
    assert week_start_monday("2024-01-08") == date(2024, 1, 8)


def test_week_start_monday_sunday_belongs_to_previous_monday():
    assert week_start_monday("2024-01-14") == date(2024, 1, 8)


def test_week_start_monday_across_year_boundary():
    assert week_start_monday("2025-01-01") == date(2024, 12, 30)


def test_day_index_in_week():
    """Test Monday=1 through Sunday=7"""
    week = ["2024-01-08", "2024-01-09", "2024-01-10", "2024-01-11", "2024-01-12", "2024-01-13", "2024-01-14"]
    assert [day_index_in_week(d) for d in week] == [1, 2, 3, 4, 5, 6, 7]


# ============================================================================
# Range Enumeration Tests
# ============================================================================

def test_enumerate_dates_inclusive():
    result = list(enumerate_dates_inclusive("2024-02-27", "2024-03-01"))

    assert result == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_enumerate_dates_single_day():
    assert list(enumerate_dates_inclusive("2024-01-01", "2024-01-01")) == [date(2024, 1, 1)]


def test_enumerate_dates_empty_when_start_after_end():
    assert list(enumerate_dates_inclusive("2024-01-02", "2024-01-01")) == []


def test_enumerate_dates_is_lazy():
    result = enumerate_dates_inclusive("2024-01-01", "9999-12-30")

    assert isinstance(result, GeneratorType)
    assert next(result) == date(2024, 1, 1)


# ============================================================================
# Comparison Helper Tests
# ============================================================================

def test_add_days():
    assert add_days("2024-03-01", -1) == date(2024, 2, 29)


def test_is_same_day():
    assert is_same_day("2024-01-10", date(2024, 1, 10)) is True
    assert is_same_day("2024-01-10", "2024-01-11") is False


def test_is_same_day_missing_side():
    assert is_same_day(None, "2024-01-10") is False
    assert is_same_day("2024-01-10", None) is False


def test_today_in_timezone_returns_date():
    assert isinstance(today_in_timezone("UTC"), date)


def test_today_in_timezone_unknown_zone():
    with pytest.raises(InvalidInputError):
        today_in_timezone("Not/AZone")
