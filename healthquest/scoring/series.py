"""
Series Aggregation

Summarizes a chronological run of daily scores: on-track percentage,
current and best on-track streaks, and Great/Okay/Behind counts.

Only score values are seen here. Calendar gaps must already be filled by
the caller (see scoring.history.score_date_range).
"""

import logging
from typing import Iterable, Sequence

from healthquest.exceptions import InvalidInputError
from healthquest.models.scoring import (
    MAX_DAILY_SCORE,
    ON_TRACK_THRESHOLD,
    DayLabel,
    SeriesSummary,
    label_for_score,
)

logger = logging.getLogger(__name__)


def _round_half_up(numerator: int, denominator: int) -> int:
    return (2 * numerator + denominator) // (2 * denominator)


def _validate_scores(scores: Iterable[int]) -> list[int]:
    values = list(scores)
    for score in values:
        if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= MAX_DAILY_SCORE:
            raise InvalidInputError(
                f"daily score must be an integer between 0 and {MAX_DAILY_SCORE}",
                field="score",
                value=score,
            )
    return values


def current_streak(scores: Sequence[int], threshold: int = ON_TRACK_THRESHOLD) -> int:
    """Qualifying days counted back from the last entry"""
    streak = 0
    for score in reversed(scores):
        if score < threshold:
            break
        streak += 1
    return streak


def best_streak(scores: Sequence[int], threshold: int = ON_TRACK_THRESHOLD) -> int:
    """Longest run of qualifying days anywhere in the series"""
    best = 0
    running = 0
    for score in scores:
        if score >= threshold:
            running += 1
            best = max(best, running)
        else:
            running = 0
    return best


def on_track_percent(scores: Sequence[int]) -> int:
    """Share of all possible checks that were met, 0-100"""
    if not scores:
        return 0
    return _round_half_up(100 * sum(scores), MAX_DAILY_SCORE * len(scores))


def aggregate_series(scores: Iterable[int]) -> SeriesSummary:
    """
    Summarize chronological daily scores

    Args:
        scores: Daily scores (0-4), oldest first

    Returns:
        SeriesSummary; all zeros for an empty series
    """
    values = _validate_scores(scores)
    if not values:
        return SeriesSummary()

    labels = [label_for_score(score) for score in values]

    return SeriesSummary(
        days=len(values),
        on_track_percent=on_track_percent(values),
        average_score=_round_half_up(10 * sum(values), len(values)) / 10,
        current_streak=current_streak(values),
        best_streak=best_streak(values),
        great_days=labels.count(DayLabel.GREAT),
        okay_days=labels.count(DayLabel.OKAY),
        behind_days=labels.count(DayLabel.BEHIND),
    )
