"""Unit tests for Completion Streak rule (healthquest/gamification/streak_system.py)"""
import pytest
from datetime import date

from healthquest.exceptions import InvalidInputError
from healthquest.gamification.streak_system import compute_streak


def test_first_completion_starts_streak():
    """Test no previous completion gives a streak of 1"""
    assert compute_streak(0, None, "2024-01-10") == 1


def test_consecutive_day_increments():
    assert compute_streak(2, "2024-01-10", "2024-01-11") == 3


def test_gap_resets_streak():
    """Test skipped days reset with no grace period"""
    assert compute_streak(2, "2024-01-10", "2024-01-13") == 1


def test_single_skipped_day_resets():
    assert compute_streak(9, "2024-01-10", "2024-01-12") == 1


def test_same_day_keeps_streak():
    assert compute_streak(5, "2024-01-10", "2024-01-10") == 5


def test_month_boundary_is_consecutive():
    assert compute_streak(4, date(2024, 2, 29), date(2024, 3, 1)) == 5


def test_accepts_date_objects_and_strings():
    assert compute_streak(1, date(2024, 1, 10), "2024-01-11") == 2


def test_malformed_date_rejected():
    with pytest.raises(InvalidInputError):
        compute_streak(1, "2024/01/10", "2024-01-11")


def test_negative_streak_rejected():
    with pytest.raises(InvalidInputError):
        compute_streak(-1, None, "2024-01-11")
