"""
Weekly Workout Pace Tracking

Counts distinct workout days per Monday-start week. A day counts once no
matter how many sessions were logged, and every Monday starts a fresh count.

The tracker keeps an explicit map of week start -> workout dates, so the
count for a date depends only on which days of that week were observed,
not on the order they were observed in.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Iterator, Tuple

from healthquest.models.metrics import DailyMetrics
from healthquest.models.scoring import WeekPaceState
from healthquest.scoring.daily_score import expected_workout_days
from healthquest.utils.datetime_helpers import (
    DateLike,
    day_index_in_week,
    enumerate_dates_inclusive,
    to_date,
    week_start_monday,
)

logger = logging.getLogger(__name__)


class WeeklyPaceTracker:
    """
    Running distinct-workout-day counter for one user

    Never share a tracker between users.
    """

    def __init__(self):
        self._workout_dates: dict[date, set[date]] = defaultdict(set)

    def observe(self, metrics: DailyMetrics) -> int:
        """
        Record a day and return its workout-days-so-far count

        Re-observing a date is idempotent.

        Returns:
            Distinct workout days in the date's week up to and including it
        """
        if metrics.did_workout:
            self._workout_dates[week_start_monday(metrics.date)].add(metrics.date)
        return self.workout_days_through(metrics.date)

    def workout_days_through(self, day: DateLike) -> int:
        """Distinct workout days observed from that week's Monday to day"""
        day = to_date(day)
        week_dates = self._workout_dates.get(week_start_monday(day), ())
        return sum(1 for workout_date in week_dates if workout_date <= day)

    def state_for(self, day: DateLike) -> WeekPaceState:
        day = to_date(day)
        return WeekPaceState(
            week_start=week_start_monday(day),
            workout_days_so_far=self.workout_days_through(day),
        )

    def expected_by(self, day: DateLike, workouts_per_week_target: int) -> int:
        """Workout days the weekly target expects by this day"""
        return expected_workout_days(workouts_per_week_target, day_index_in_week(day))

    def is_on_pace(self, day: DateLike, workouts_per_week_target: int) -> bool:
        return self.workout_days_through(day) >= self.expected_by(day, workouts_per_week_target)


def track_weekly_pace(days: Iterable[DailyMetrics]) -> Iterator[Tuple[DailyMetrics, int]]:
    """
    Walk days in order, yielding each with its workout-days-so-far count

    Uses a fresh tracker per call, so one call must cover one user.
    """
    tracker = WeeklyPaceTracker()
    for metrics in days:
        yield metrics, tracker.observe(metrics)


def workout_days_for(days: Iterable[DailyMetrics], target: DateLike) -> int:
    """
    Replay the target date's week from Monday and return its count

    Days outside [Monday, target] are ignored; missing days in that window
    count as non-workout days.
    """
    target = to_date(target)
    window = set(enumerate_dates_inclusive(week_start_monday(target), target))
    tracker = WeeklyPaceTracker()
    for metrics in days:
        if metrics.date in window:
            tracker.observe(metrics)
    return tracker.workout_days_through(target)
