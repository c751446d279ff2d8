"""
ProgressService - Scoring Views

Builds the history, analytics and dashboard views over metrics supplied by
the log store. Pure computation; nothing is persisted.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping

from healthquest.models.metrics import DailyMetrics, Goals
from healthquest.models.scoring import DailyScoreResult
from healthquest.scoring.history import score_date_range
from healthquest.scoring.series import aggregate_series
from healthquest.scoring.weekly_pace import WeeklyPaceTracker
from healthquest.utils.datetime_helpers import DateLike, to_date, week_start_monday

logger = logging.getLogger(__name__)


class ProgressService:
    """
    Service for progress views.

    Responsibilities:
    - Day-by-day scoring over a date range
    - Range summaries (on-track %, streaks, label counts)
    - This week's workout pace for the dashboard
    """

    def __init__(self, goals: Goals):
        self.goals = goals

    def score_range(
        self,
        start: DateLike,
        end: DateLike,
        metrics_by_date: Mapping[date, DailyMetrics],
    ) -> list[DailyScoreResult]:
        """Scores for every date in the range, oldest first"""
        return score_date_range(start, end, metrics_by_date, self.goals)

    def summarize_range(
        self,
        start: DateLike,
        end: DateLike,
        metrics_by_date: Mapping[date, DailyMetrics],
        newest_first: bool = False,
    ) -> Dict[str, Any]:
        """
        Scores plus summary for a date range

        Returns:
            {
                'start': date,
                'end': date,
                'days': list[DailyScoreResult],
                'summary': SeriesSummary
            }
        """
        days = self.score_range(start, end, metrics_by_date)
        summary = aggregate_series(day.score for day in days)

        logger.info(
            f"Range {to_date(start)}..{to_date(end)}: {summary.days} days, "
            f"{summary.on_track_percent}% on track, best streak {summary.best_streak}"
        )

        if newest_first:
            days = list(reversed(days))

        return {
            'start': to_date(start),
            'end': to_date(end),
            'days': days,
            'summary': summary,
        }

    def weekly_pace_status(self, workout_log_dates: Iterable[DateLike], today: DateLike) -> Dict[str, Any]:
        """
        This week's workout pace from raw workout log dates

        Several sessions on one day count as one workout day; logs outside
        Monday..today are ignored.

        Returns:
            {
                'week_start': date,
                'workout_days': int,
                'sessions': int,
                'expected': int,
                'on_pace': bool
            }
        """
        today = to_date(today)
        week_start = week_start_monday(today)
        tracker = WeeklyPaceTracker()
        sessions = 0

        for log_date in workout_log_dates:
            log_date = to_date(log_date)
            if week_start <= log_date <= today:
                sessions += 1
                # Any positive duration marks the day as a workout day
                tracker.observe(DailyMetrics(date=log_date, workout_minutes=1))

        target = self.goals.workouts_per_week_target
        return {
            'week_start': week_start,
            'workout_days': tracker.workout_days_through(today),
            'sessions': sessions,
            'expected': tracker.expected_by(today, target),
            'on_pace': tracker.is_on_pace(today, target),
        }
