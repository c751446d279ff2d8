"""Score every day of a date range (history and analytics views)"""
import logging
from typing import Mapping

from healthquest.exceptions import InvalidInputError
from healthquest.models.metrics import DailyMetrics, Goals
from healthquest.models.scoring import DailyScoreResult
from healthquest.scoring.daily_score import compute_daily_score
from healthquest.scoring.weekly_pace import WeeklyPaceTracker
from healthquest.utils.datetime_helpers import (
    DateLike,
    add_days,
    enumerate_dates_inclusive,
    to_date,
    week_start_monday,
)

logger = logging.getLogger(__name__)


def _normalize_rows(metrics_by_date: Mapping) -> dict:
    """Re-key rows by date, rejecting rows filed under another day"""
    rows = {}
    for key, metrics in metrics_by_date.items():
        day = to_date(key)
        if metrics.date != day:
            raise InvalidInputError(
                f"row for {day} holds metrics dated {metrics.date}",
                field="metrics_by_date",
                value=str(key),
            )
        rows[day] = metrics
    return rows


def score_date_range(
    start: DateLike,
    end: DateLike,
    metrics_by_date: Mapping,
    goals: Goals,
    replay_from_monday: bool = True,
) -> list[DailyScoreResult]:
    """
    Score each date from start to end, oldest first

    Days missing from metrics_by_date are scored as nothing logged, so the
    result has no gaps.

    Args:
        start: First date of the range
        end: Last date of the range (inclusive)
        metrics_by_date: DailyMetrics keyed by date or ISO date string
        goals: User's targets
        replay_from_monday: Count workouts logged earlier in start's week
            (from metrics_by_date) toward the first days' pace. Without it,
            a range starting mid-week begins that week at 0.

    Returns:
        One DailyScoreResult per date

    Raises:
        InvalidInputError: If a key is not a valid date or a row's date
            differs from its key
    """
    metrics_by_date = _normalize_rows(metrics_by_date)
    tracker = WeeklyPaceTracker()
    dates = list(enumerate_dates_inclusive(start, end))
    if not dates:
        return []

    if replay_from_monday:
        for day in enumerate_dates_inclusive(week_start_monday(dates[0]), add_days(dates[0], -1)):
            if day in metrics_by_date:
                tracker.observe(metrics_by_date[day])

    results = []
    for day in dates:
        metrics = metrics_by_date.get(day) or DailyMetrics.empty(day)
        workout_days = tracker.observe(metrics)
        results.append(compute_daily_score(metrics, goals, workout_days))

    logger.debug(
        f"Scored {len(results)} days from {dates[0]} to {dates[-1]}"
    )
    return results
