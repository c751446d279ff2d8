"""
Progress scoring for healthquest

Turns daily metric rows and goals into:
- A 0-4 daily score with Great/Okay/Behind labels
- A weekly workout pace verdict (distinct workout days vs prorated target)
- Current/best on-track streaks and on-track percentage over a range
"""

from healthquest.scoring.daily_score import compute_daily_score, expected_workout_days
from healthquest.scoring.weekly_pace import WeeklyPaceTracker, track_weekly_pace, workout_days_for
from healthquest.scoring.series import aggregate_series
from healthquest.scoring.history import score_date_range
from healthquest.scoring.fit_score import compute_fit_score

__all__ = [
    "compute_daily_score",
    "expected_workout_days",
    "WeeklyPaceTracker",
    "track_weekly_pace",
    "workout_days_for",
    "aggregate_series",
    "score_date_range",
    "compute_fit_score",
]
