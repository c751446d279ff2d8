"""
Completion Streak Tracking

A completion streak counts consecutive calendar days on which every daily
quest was completed.

Logic:
- First completion ever: streak is 1
- Same day as the last completion: unchanged
- Day after the last completion: streak continues (+1)
- Any skipped day: streak resets to 1 (no freeze days, no grace period)
"""

import logging
from datetime import date
from typing import Optional

from healthquest.exceptions import InvalidInputError
from healthquest.utils.datetime_helpers import DateLike, add_days, to_date

logger = logging.getLogger(__name__)


def compute_streak(
    prev_streak: int,
    last_completed_date: Optional[DateLike],
    completed_date: DateLike,
) -> int:
    """
    Next completion streak after completing all quests on completed_date

    Args:
        prev_streak: Streak before this completion
        last_completed_date: Previous fully completed day, or None
        completed_date: Day just fully completed

    Returns:
        New streak length
    """
    if prev_streak < 0:
        raise InvalidInputError("streak cannot be negative", field="prev_streak", value=prev_streak)

    completed: date = to_date(completed_date)

    if last_completed_date is None:
        return 1

    last = to_date(last_completed_date)

    if last == completed:
        return prev_streak

    if last == add_days(completed, -1):
        return prev_streak + 1

    logger.info(f"Completion streak reset: last {last}, now {completed}, was {prev_streak}")
    return 1
