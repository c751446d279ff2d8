"""Unit tests for Badge System (healthquest/gamification/achievement_system.py)"""
import pytest

from healthquest.gamification.achievement_system import (
    BADGE_CATALOG,
    badges_due,
    evaluate_badges,
    get_badge,
    split_catalog,
)
from healthquest.models.achievement import UserBadge


def test_catalog_ids():
    assert [badge.id for badge in BADGE_CATALOG] == ["first_log", "streak_3", "streak_7"]


def test_badges_due_by_streak():
    assert badges_due(1) == ["first_log"]
    assert badges_due(3) == ["first_log", "streak_3"]
    assert badges_due(7) == ["first_log", "streak_3", "streak_7"]


def test_first_completion_awards_first_log(test_user_id, fixed_now):
    awarded = evaluate_badges(test_user_id, 1, [], fixed_now)

    assert [badge.badge_id for badge in awarded] == ["first_log"]
    assert awarded[0].earned_at == fixed_now
    assert awarded[0].user_id == test_user_id


def test_held_badges_not_duplicated(test_user_id, fixed_now):
    """Test only missing badges are awarded"""
    held = [
        UserBadge(user_id=test_user_id, badge_id="first_log", earned_at=fixed_now),
        UserBadge(user_id=test_user_id, badge_id="streak_3", earned_at=fixed_now),
    ]

    awarded = evaluate_badges(test_user_id, 7, held, fixed_now)

    assert [badge.badge_id for badge in awarded] == ["streak_7"]


def test_streak_reset_never_revokes(test_user_id, fixed_now):
    held = [UserBadge(user_id=test_user_id, badge_id=b.id, earned_at=fixed_now) for b in BADGE_CATALOG]

    assert evaluate_badges(test_user_id, 1, held, fixed_now) == []


def test_split_catalog(test_user_id, fixed_now):
    earned, locked = split_catalog([UserBadge(user_id=test_user_id, badge_id="first_log", earned_at=fixed_now)])

    assert [b.id for b in earned] == ["first_log"]
    assert [b.id for b in locked] == ["streak_3", "streak_7"]


def test_get_badge_unknown():
    with pytest.raises(KeyError):
        get_badge("streak_365")
