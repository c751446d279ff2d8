"""
Fit Score

A 0-100 composite for the dashboard:
- Steps: share of the step goal, up to 40 points
- Sleep: share of 8 hours, up to 25 points
- Water: share of 2000 ml, up to 20 points
- Workout: 15 points for any workout logged
"""

from decimal import Decimal, ROUND_HALF_UP

STEPS_POINTS = 40
SLEEP_POINTS = 25
WATER_POINTS = 20
WORKOUT_POINTS = 15

SLEEP_REFERENCE_HOURS = 8
WATER_REFERENCE_ML = 2000


def _part(value: float, reference: float, points: int) -> Decimal:
    share = Decimal(str(value)) / Decimal(str(max(1, reference))) * points
    return max(Decimal(0), min(Decimal(points), share))


def compute_fit_score(
    steps: int,
    steps_goal: int,
    sleep_hours: float,
    water_ml: int,
    workouts_count: int,
) -> int:
    """Composite 0-100 fitness score for one day"""
    total = (
        _part(steps, steps_goal, STEPS_POINTS)
        + _part(sleep_hours, SLEEP_REFERENCE_HOURS, SLEEP_POINTS)
        + _part(water_ml, WATER_REFERENCE_ML, WATER_POINTS)
        + (WORKOUT_POINTS if workouts_count > 0 else 0)
    )
    return int(total.quantize(Decimal(1), rounding=ROUND_HALF_UP))
