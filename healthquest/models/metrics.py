"""Goal and daily metric models"""
import logging
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from healthquest import config
from healthquest.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class GoalType(str, Enum):
    """What the user is training for"""
    GENERAL_FITNESS = "general_fitness"
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"


class Goals(BaseModel):
    """Per-user targets, owned by the goals store and read-only here"""
    model_config = ConfigDict(frozen=True)

    steps_target: int = Field(ge=0)
    water_ml_target: int = Field(ge=0)
    sleep_hours_target: float = Field(ge=0)
    workouts_per_week_target: int = Field(ge=0, le=7)
    calories_target: int = Field(ge=0)
    goal_type: GoalType = GoalType.GENERAL_FITNESS


class DailyMetrics(BaseModel):
    """One user's aggregated logs for one calendar day"""
    model_config = ConfigDict(frozen=True)

    date: date
    steps: int = Field(default=0, ge=0)
    water_ml: int = Field(default=0, ge=0)
    sleep_hours: float = Field(default=0.0, ge=0)
    workout_minutes: int = Field(default=0, ge=0)
    calories: int = Field(default=0, ge=0)  # carried for history views, not scored
    protein_g: float = Field(default=0.0, ge=0)

    @classmethod
    def empty(cls, day: date) -> "DailyMetrics":
        """A day with nothing logged"""
        return cls(date=day)

    @property
    def did_workout(self) -> bool:
        return self.workout_minutes > 0


def _raise_invalid(model_name: str, error: ValidationError, user_id: Optional[str]) -> None:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    raise InvalidInputError(
        f"{model_name}: {first['msg']}",
        field=field,
        value=first.get("input"),
        user_id=user_id,
        cause=error,
    )


def build_goals(row: Optional[dict[str, Any]] = None, user_id: Optional[str] = None) -> Goals:
    """
    Build Goals from a stored row, filling configured defaults

    Args:
        row: Goals row from the goals store, or None if the user has none
        user_id: For error context only

    Returns:
        Validated Goals

    Raises:
        InvalidInputError: If a stored target is out of range
    """
    row = row or {}
    values = {
        "steps_target": row.get("steps_target"),
        "water_ml_target": row.get("water_ml_target"),
        "sleep_hours_target": row.get("sleep_hours_target"),
        "workouts_per_week_target": row.get("workouts_per_week_target"),
        "calories_target": row.get("calories_target"),
        "goal_type": row.get("goal_type"),
    }
    defaults = {
        "steps_target": config.DEFAULT_STEPS_TARGET,
        "water_ml_target": config.DEFAULT_WATER_ML_TARGET,
        "sleep_hours_target": config.DEFAULT_SLEEP_HOURS_TARGET,
        "workouts_per_week_target": config.DEFAULT_WORKOUTS_PER_WEEK_TARGET,
        "calories_target": config.DEFAULT_CALORIES_TARGET,
        "goal_type": config.DEFAULT_GOAL_TYPE,
    }
    for key, value in values.items():
        if value is None:
            values[key] = defaults[key]

    try:
        return Goals(**values)
    except ValidationError as e:
        _raise_invalid("Goals", e, user_id)


def build_daily_metrics(day: date, user_id: Optional[str] = None, **values: Any) -> DailyMetrics:
    """
    Build DailyMetrics from already-aggregated log values

    Missing values count as nothing logged.

    Raises:
        InvalidInputError: If a value is negative or not numeric
    """
    cleaned = {key: value for key, value in values.items() if value is not None}
    try:
        return DailyMetrics(date=day, **cleaned)
    except ValidationError as e:
        _raise_invalid("DailyMetrics", e, user_id)
