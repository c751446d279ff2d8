"""
Daily Quests

Four fixed quests exist for every user and day. Ensuring them is an
idempotent create: a row that already exists is reported as
ALREADY_EXISTS and left exactly as it is, so a completed quest is never
reset by a later ensure.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from healthquest.models.gamification import DailyQuest, EnsureOutcome
from healthquest.models.metrics import DailyMetrics
from healthquest.utils.datetime_helpers import DateLike, to_date

logger = logging.getLogger(__name__)

MIN_WATER_ML_FOR_QUEST = 500


@dataclass(frozen=True)
class QuestTemplate:
    quest_id: str
    title: str
    xp_reward: int


QUEST_TEMPLATES: tuple[QuestTemplate, ...] = (
    QuestTemplate("log_steps", "Log your steps", 15),
    QuestTemplate("log_water", "Drink & log 500ml water", 15),
    QuestTemplate("log_sleep", "Log sleep hours", 10),
    QuestTemplate("do_workout", "Log a workout session", 20),
)

QUEST_IDS = tuple(template.quest_id for template in QUEST_TEMPLATES)


def ensure_daily_quests(
    existing: Iterable[DailyQuest],
    user_id: str,
    day: DateLike,
) -> tuple[tuple[DailyQuest, ...], dict[str, EnsureOutcome]]:
    """
    Make sure every quest template has a row for (user_id, day)

    Args:
        existing: Quest rows already stored (rows of other users or dates
            are ignored)
        user_id: Quest owner
        day: Quest date

    Returns:
        (quests for the day in template order, outcome per quest id)
    """
    day: date = to_date(day)
    by_id = {
        quest.quest_id: quest
        for quest in existing
        if quest.user_id == user_id and quest.date == day
    }

    quests = []
    outcomes: dict[str, EnsureOutcome] = {}
    for template in QUEST_TEMPLATES:
        quest = by_id.get(template.quest_id)
        if quest is not None:
            outcomes[template.quest_id] = EnsureOutcome.ALREADY_EXISTS
        else:
            quest = DailyQuest(
                user_id=user_id,
                date=day,
                quest_id=template.quest_id,
                title=template.title,
                xp_reward=template.xp_reward,
            )
            outcomes[template.quest_id] = EnsureOutcome.CREATED
        quests.append(quest)

    created = [qid for qid, outcome in outcomes.items() if outcome is EnsureOutcome.CREATED]
    if created:
        logger.debug(f"Created quests {created} for user {user_id} on {day}")

    return tuple(quests), outcomes


def quests_satisfied_by(metrics: DailyMetrics) -> list[str]:
    """Quest ids whose underlying metric has been logged for the day"""
    satisfied = []
    if metrics.steps > 0:
        satisfied.append("log_steps")
    if metrics.water_ml >= MIN_WATER_ML_FOR_QUEST:
        satisfied.append("log_water")
    if metrics.sleep_hours > 0:
        satisfied.append("log_sleep")
    if metrics.did_workout:
        satisfied.append("do_workout")
    return satisfied
