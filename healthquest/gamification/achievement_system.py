"""
Badge System

Static badge catalog and award rules. Badges are evaluated only when a day's
quests are all completed for the first time:
- first_log: first fully completed day
- streak_3: completion streak of 3 days
- streak_7: completion streak of 7 days

Awards are append-only: a held badge is never duplicated or revoked.
"""

import logging
from datetime import datetime
from typing import Iterable

from healthquest.models.achievement import Badge, UserBadge

logger = logging.getLogger(__name__)

BADGE_CATALOG: tuple[Badge, ...] = (
    Badge(
        id="first_log",
        name="First Steps",
        icon="🎯",
        description="Complete all daily quests for the first time",
    ),
    Badge(
        id="streak_3",
        name="On a Roll",
        icon="🔥",
        description="Complete all daily quests 3 days in a row",
    ),
    Badge(
        id="streak_7",
        name="Unstoppable",
        icon="🏆",
        description="Complete all daily quests 7 days in a row",
    ),
)

STREAK_BADGES = {"streak_3": 3, "streak_7": 7}


def get_badge(badge_id: str) -> Badge:
    for badge in BADGE_CATALOG:
        if badge.id == badge_id:
            return badge
    raise KeyError(badge_id)


def badges_due(completion_streak: int) -> list[str]:
    """Badge ids a fully completed day qualifies for, catalog order"""
    due = ["first_log"]
    for badge_id, threshold in STREAK_BADGES.items():
        if completion_streak >= threshold:
            due.append(badge_id)
    return due


def evaluate_badges(
    user_id: str,
    completion_streak: int,
    earned: Iterable[UserBadge],
    now: datetime,
) -> list[UserBadge]:
    """
    Newly earned badges for a fully completed day

    Args:
        user_id: Badge owner
        completion_streak: Streak after the completion
        earned: Badges the user already holds
        now: Award timestamp

    Returns:
        UserBadge rows to append (empty if nothing new)
    """
    held = {badge.badge_id for badge in earned}
    new_badges = [
        UserBadge(user_id=user_id, badge_id=badge_id, earned_at=now)
        for badge_id in badges_due(completion_streak)
        if badge_id not in held
    ]

    for badge in new_badges:
        logger.info(f"User {user_id} earned badge: {badge.badge_id} ({get_badge(badge.badge_id).name})")

    return new_badges


def split_catalog(earned: Iterable[UserBadge]) -> tuple[list[Badge], list[Badge]]:
    """(earned, locked) catalog entries for display"""
    held = {badge.badge_id for badge in earned}
    unlocked = [badge for badge in BADGE_CATALOG if badge.id in held]
    locked = [badge for badge in BADGE_CATALOG if badge.id not in held]
    return unlocked, locked
