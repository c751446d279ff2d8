"""
Quest Transition Engine

Applies one quest action to a gamification snapshot and returns the new
snapshot. The input snapshot is frozen and never modified, so a failure at
any step leaves the caller holding the prior state.

One call performs, in order:
1. Ensure the day's quests exist (existing rows untouched)
2. Complete or un-complete the requested quest (idempotent)
3. On the first time all of a day's quests are complete:
   +25 XP bonus, completion streak update, last completed date, badges
4. Level recompute from the new XP total

Un-completing a quest takes back only that quest's XP. The daily bonus,
streak, last completed date and badges are never retracted, and since the
last completed date stays on that day, completing the day again does not
pay the bonus twice.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from healthquest.exceptions import InvalidInputError
from healthquest.gamification.achievement_system import evaluate_badges
from healthquest.gamification.quests import ensure_daily_quests
from healthquest.gamification.streak_system import compute_streak
from healthquest.gamification.xp_system import level_from_xp
from healthquest.models.gamification import (
    EnsureOutcome,
    GamificationSnapshot,
    QuestAction,
    QuestTransitionResult,
)

logger = logging.getLogger(__name__)

DAILY_BONUS_XP = 25


def apply_quest_transition(
    snapshot: GamificationSnapshot,
    action: QuestAction,
    now: Optional[datetime] = None,
) -> QuestTransitionResult:
    """
    Apply a quest action to a user's snapshot

    Args:
        snapshot: Current state, the action date's quests and earned badges
        action: Quest to complete/un-complete (quest_id=None only ensures)
        now: Timestamp for newly earned badges (defaults to now, UTC)

    Returns:
        QuestTransitionResult holding the new snapshot. When nothing
        changed, result.snapshot is the input snapshot itself.

    Raises:
        InvalidInputError: If the snapshot belongs to another user or the
            quest id is unknown
    """
    if snapshot.user_id != action.user_id:
        raise InvalidInputError(
            "snapshot belongs to a different user",
            field="user_id",
            value=action.user_id,
            user_id=action.user_id,
            operation="apply_quest_transition",
        )

    state = snapshot.state
    old_level = state.level

    quests, ensured = ensure_daily_quests(snapshot.quests, action.user_id, action.date)
    if quests != snapshot.quests:
        snapshot = snapshot.model_copy(update={"quests": quests})
    ensure_changed = any(outcome is EnsureOutcome.CREATED for outcome in ensured.values())

    unchanged = QuestTransitionResult(
        snapshot=snapshot,
        changed=ensure_changed,
        ensured=ensured,
        old_level=old_level,
        new_level=old_level,
    )

    if action.quest_id is None:
        return unchanged

    quest = snapshot.quest(action.quest_id)
    if quest is None:
        raise InvalidInputError(
            f"unknown quest '{action.quest_id}'",
            field="quest_id",
            value=action.quest_id,
            user_id=action.user_id,
            operation="apply_quest_transition",
        )

    if quest.completed == action.completed:
        logger.debug(
            f"Quest {quest.quest_id} for user {action.user_id} on {action.date} "
            f"already {'completed' if quest.completed else 'open'}, no change"
        )
        return unchanged

    updated_quests = tuple(
        q.model_copy(update={"completed": action.completed}) if q.quest_id == quest.quest_id else q
        for q in snapshot.quests
    )

    xp = state.xp
    streak = state.completion_streak
    last_completed = state.last_completed_date
    badges = snapshot.badges
    new_badges = ()
    bonus_awarded = False

    if action.completed:
        xp += quest.xp_reward
        message = f"✅ +{quest.xp_reward} XP"

        all_done = all(q.completed for q in updated_quests)
        if all_done and last_completed != action.date:
            xp += DAILY_BONUS_XP
            streak = compute_streak(streak, last_completed, action.date)
            last_completed = action.date
            bonus_awarded = True

            awarded = evaluate_badges(action.user_id, streak, badges, now or datetime.now(timezone.utc))
            badges = badges + tuple(awarded)
            new_badges = tuple(badge.badge_id for badge in awarded)
            message = f"🎉 Daily quests complete! +{DAILY_BONUS_XP} XP streak bonus!"
    else:
        xp = max(0, xp - quest.xp_reward)
        message = f"↩️ -{quest.xp_reward} XP"

    new_level = level_from_xp(xp).level

    new_state = state.model_copy(update={
        "xp": xp,
        "level": new_level,
        "completion_streak": streak,
        "last_completed_date": last_completed,
    })
    new_snapshot = snapshot.model_copy(update={
        "state": new_state,
        "quests": updated_quests,
        "badges": badges,
    })

    xp_delta = xp - state.xp
    logger.info(
        f"Quest {quest.quest_id} {'completed' if action.completed else 'reopened'} "
        f"by user {action.user_id} on {action.date}: {xp_delta:+d} XP, "
        f"total {xp}, level {new_level}, streak {streak}"
    )
    if bonus_awarded:
        logger.info(f"User {action.user_id} completed all quests on {action.date}, streak {streak}")
    if new_level > old_level:
        logger.info(f"User {action.user_id} leveled up from {old_level} to {new_level}!")

    return QuestTransitionResult(
        snapshot=new_snapshot,
        changed=True,
        ensured=ensured,
        xp_delta=xp_delta,
        bonus_awarded=bonus_awarded,
        new_badges=new_badges,
        leveled_up=new_level > old_level,
        old_level=old_level,
        new_level=new_level,
        message=message,
    )
