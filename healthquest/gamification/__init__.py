"""
Gamification system for healthquest

Turns daily logging into progression:
- XP and leveling curve
- Completion streaks
- Daily quests with an all-complete bonus
- Badges

All transitions go through apply_quest_transition, which works on immutable
snapshots; persistence lives behind gamification.store.
"""

from healthquest.gamification.xp_system import level_from_xp, xp_for_level, total_xp_for_level
from healthquest.gamification.streak_system import compute_streak
from healthquest.gamification.quests import ensure_daily_quests, quests_satisfied_by, QUEST_TEMPLATES
from healthquest.gamification.achievement_system import evaluate_badges, BADGE_CATALOG
from healthquest.gamification.engine import apply_quest_transition, DAILY_BONUS_XP

__all__ = [
    "level_from_xp",
    "xp_for_level",
    "total_xp_for_level",
    "compute_streak",
    "ensure_daily_quests",
    "quests_satisfied_by",
    "QUEST_TEMPLATES",
    "evaluate_badges",
    "BADGE_CATALOG",
    "apply_quest_transition",
    "DAILY_BONUS_XP",
]
