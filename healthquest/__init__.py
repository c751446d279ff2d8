"""
healthquest - progress scoring and gamification engine

Scores daily health metrics against user goals and drives the XP, level,
streak, quest and badge progression built on top of them.
"""

from healthquest.scoring import (
    compute_daily_score,
    track_weekly_pace,
    WeeklyPaceTracker,
    aggregate_series,
    score_date_range,
)
from healthquest.gamification import (
    level_from_xp,
    xp_for_level,
    compute_streak,
    ensure_daily_quests,
    apply_quest_transition,
)

__version__ = "0.1.0"

__all__ = [
    "compute_daily_score",
    "track_weekly_pace",
    "WeeklyPaceTracker",
    "aggregate_series",
    "score_date_range",
    "level_from_xp",
    "xp_for_level",
    "compute_streak",
    "ensure_daily_quests",
    "apply_quest_transition",
]
