"""
Daily Score Calculator

Scores one day against the user's goals:
- Steps, water and sleep are met when the logged value reaches the target
- Workout pace is met when distinct workout days so far this week reach
  the prorated weekly target for the day of the week

Score is the number of checks met (0-4).
"""

import logging
from typing import Optional

from healthquest.exceptions import InvalidInputError
from healthquest.models.metrics import DailyMetrics, Goals
from healthquest.models.scoring import DailyScoreResult
from healthquest.utils.datetime_helpers import day_index_in_week

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def expected_workout_days(workouts_per_week_target: int, day_index: int) -> int:
    """
    Workout days expected by the given day of the week

    ceil(target * day_index / 7) with integer arithmetic, so e.g.
    target 3 expects 1 by Monday, 2 by Wednesday and 3 by Sunday.

    Args:
        workouts_per_week_target: Weekly goal (0-7)
        day_index: Monday=1 ... Sunday=7

    Returns:
        Expected distinct workout days so far
    """
    if not 0 <= workouts_per_week_target <= DAYS_PER_WEEK:
        raise InvalidInputError(
            "workouts per week must be between 0 and 7",
            field="workouts_per_week_target",
            value=workouts_per_week_target,
        )
    if not 1 <= day_index <= DAYS_PER_WEEK:
        raise InvalidInputError(
            "day index must be between 1 (Monday) and 7 (Sunday)",
            field="day_index",
            value=day_index,
        )
    return -(-(workouts_per_week_target * day_index) // DAYS_PER_WEEK)


def compute_daily_score(
    metrics: DailyMetrics,
    goals: Goals,
    workout_days_so_far: int,
    day_index: Optional[int] = None,
) -> DailyScoreResult:
    """
    Score one day

    Args:
        metrics: The day's aggregated logs
        goals: User's targets
        workout_days_so_far: Distinct workout days this week up to and
            including metrics.date (see WeeklyPaceTracker)
        day_index: Monday=1 ... Sunday=7; derived from metrics.date if omitted

    Returns:
        DailyScoreResult with the four checks and the 0-4 score
    """
    if workout_days_so_far < 0:
        raise InvalidInputError(
            "workout days so far cannot be negative",
            field="workout_days_so_far",
            value=workout_days_so_far,
        )
    if day_index is None:
        day_index = day_index_in_week(metrics.date)

    expected = expected_workout_days(goals.workouts_per_week_target, day_index)

    on_steps = metrics.steps >= goals.steps_target
    on_water = metrics.water_ml >= goals.water_ml_target
    on_sleep = metrics.sleep_hours >= goals.sleep_hours_target
    on_workout_pace = workout_days_so_far >= expected

    score = sum((on_steps, on_water, on_sleep, on_workout_pace))

    return DailyScoreResult(
        date=metrics.date,
        on_steps=on_steps,
        on_water=on_water,
        on_sleep=on_sleep,
        on_workout_pace=on_workout_pace,
        workout_days_so_far=workout_days_so_far,
        expected_workout_days=expected,
        score=score,
    )
