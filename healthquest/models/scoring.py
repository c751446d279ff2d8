"""Derived scoring models (computed on demand, never persisted)"""
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

# A day counts toward streaks when at least this many checks pass
ON_TRACK_THRESHOLD = 3
MAX_DAILY_SCORE = 4


class DayLabel(str, Enum):
    """History view verdict for a day"""
    GREAT = "Great"
    OKAY = "Okay"
    BEHIND = "Behind"


def label_for_score(score: int) -> DayLabel:
    if score >= ON_TRACK_THRESHOLD:
        return DayLabel.GREAT
    if score == 2:
        return DayLabel.OKAY
    return DayLabel.BEHIND


class DailyScoreResult(BaseModel):
    """The four goal checks for one day and their count"""
    model_config = ConfigDict(frozen=True)

    date: date
    on_steps: bool
    on_water: bool
    on_sleep: bool
    on_workout_pace: bool
    workout_days_so_far: int = Field(ge=0)
    expected_workout_days: int = Field(ge=0)
    score: int = Field(ge=0, le=MAX_DAILY_SCORE)

    @computed_field
    @property
    def label(self) -> DayLabel:
        return label_for_score(self.score)

    @property
    def on_track(self) -> bool:
        return self.score >= ON_TRACK_THRESHOLD


class WeekPaceState(BaseModel):
    """Distinct workout days counted so far in one Monday-start week"""
    model_config = ConfigDict(frozen=True)

    week_start: date
    workout_days_so_far: int = Field(default=0, ge=0)


class SeriesSummary(BaseModel):
    """Aggregate over a chronological run of daily scores"""
    model_config = ConfigDict(frozen=True)

    days: int = 0
    on_track_percent: int = 0
    average_score: float = 0.0
    current_streak: int = 0
    best_streak: int = 0
    great_days: int = 0
    okay_days: int = 0
    behind_days: int = 0
