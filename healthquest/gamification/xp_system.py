"""
XP and Leveling System

Maps cumulative XP to a level on an arithmetic cost curve.

Leveling Curve:
- Level 1 costs 100 XP, each later level costs 50 XP more
  (100, 150, 200, ...)
- Capped at level 100; XP past the cap keeps accumulating in the
  current level for display

XP Award Rules (see gamification.quests):
- log_steps: 15 XP
- log_water: 15 XP
- log_sleep: 10 XP
- do_workout: 20 XP
- All daily quests complete: +25 XP bonus, once per day
"""

import logging

from healthquest.exceptions import InvalidInputError
from healthquest.models.gamification import LevelProgress

logger = logging.getLogger(__name__)

BASE_LEVEL_COST = 100
LEVEL_COST_STEP = 50
MAX_LEVEL = 100


def xp_for_level(level: int) -> int:
    """
    XP it costs to complete the given level

    Raises:
        InvalidInputError: If level is below 1
    """
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        raise InvalidInputError("level must be an integer >= 1", field="level", value=level)
    return BASE_LEVEL_COST + (level - 1) * LEVEL_COST_STEP


def total_xp_for_level(level: int) -> int:
    """Cumulative XP at which the given level starts"""
    xp_for_level(level)
    completed = level - 1
    return completed * BASE_LEVEL_COST + LEVEL_COST_STEP * completed * (completed - 1) // 2


def level_from_xp(xp: int) -> LevelProgress:
    """
    Calculate level from total XP

    Returns:
        LevelProgress(level, xp_into_level, xp_needed)

    Raises:
        InvalidInputError: If xp is negative or not an integer
    """
    if isinstance(xp, bool) or not isinstance(xp, int) or xp < 0:
        raise InvalidInputError("XP must be a non-negative integer", field="xp", value=xp)

    level = 1
    remaining = xp

    while level < MAX_LEVEL and remaining >= xp_for_level(level):
        remaining -= xp_for_level(level)
        level += 1

    return LevelProgress(level=level, xp_into_level=remaining, xp_needed=xp_for_level(level))
