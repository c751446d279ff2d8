"""Unit tests for ProgressService (healthquest/services/progress_service.py)"""
import pytest
from datetime import date

from healthquest.exceptions import InvalidInputError
from healthquest.models.metrics import DailyMetrics
from healthquest.models.scoring import DayLabel
from healthquest.services.progress_service import ProgressService


@pytest.fixture
def progress_service(test_goals):
    return ProgressService(test_goals)


@pytest.fixture
def three_days(great_day_metrics):
    """Two great days then an empty Wednesday (2024-01-29 is a Monday)"""
    return {
        date(2024, 1, 29): DailyMetrics(date=date(2024, 1, 29), workout_minutes=40, **great_day_metrics),
        date(2024, 1, 30): DailyMetrics(date=date(2024, 1, 30), workout_minutes=30, **great_day_metrics),
    }


# ============================================================================
# Range Summary Tests
# ============================================================================

def test_summarize_range(progress_service, three_days):
    result = progress_service.summarize_range("2024-01-29", "2024-01-31", three_days)
    summary = result['summary']

    assert result['start'] == date(2024, 1, 29)
    assert result['end'] == date(2024, 1, 31)
    assert [d.score for d in result['days']] == [4, 4, 1]
    assert summary.days == 3
    assert summary.on_track_percent == 75
    assert summary.average_score == 3.0
    assert summary.current_streak == 0
    assert summary.best_streak == 2
    assert (summary.great_days, summary.okay_days, summary.behind_days) == (2, 0, 1)


def test_summarize_range_newest_first(progress_service, three_days):
    result = progress_service.summarize_range("2024-01-29", "2024-01-31", three_days, newest_first=True)

    assert [d.date for d in result['days']] == [date(2024, 1, 31), date(2024, 1, 30), date(2024, 1, 29)]
    assert result['days'][0].label == DayLabel.BEHIND


def test_score_range_rejects_malformed_date(progress_service):
    with pytest.raises(InvalidInputError):
        progress_service.score_range("29/01/2024", "2024-01-31", {})


# ============================================================================
# Weekly Pace Status Tests
# ============================================================================

def test_weekly_pace_status(progress_service):
    logs = ["2024-01-28", "2024-01-29", "2024-01-29", "2024-01-30", "2024-02-01"]

    status = progress_service.weekly_pace_status(logs, "2024-01-31")

    assert status == {
        'week_start': date(2024, 1, 29),
        'workout_days': 2,
        'sessions': 3,
        'expected': 2,
        'on_pace': True,
    }


def test_weekly_pace_status_behind(progress_service):
    status = progress_service.weekly_pace_status([], date(2024, 1, 29))

    assert status['expected'] == 1
    assert status['on_pace'] is False
