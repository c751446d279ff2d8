"""Global test fixtures and utilities for healthquest tests"""
import pytest
from datetime import date, datetime, timezone

from healthquest.gamification.store import InMemoryGamificationStore
from healthquest.models.gamification import GamificationSnapshot
from healthquest.models.metrics import DailyMetrics, Goals, GoalType
from healthquest.services.gamification_service import GamificationService


# ============================================================================
# User Fixtures
# ============================================================================

@pytest.fixture
def test_user_id():
    """Standard test user ID"""
    return "123456789"


# ============================================================================
# Goal & Metric Fixtures
# ============================================================================

@pytest.fixture
def test_goals():
    """Standard goals (the defaults a new user gets)"""
    return Goals(
        steps_target=8000,
        water_ml_target=2000,
        sleep_hours_target=8.0,
        workouts_per_week_target=3,
        calories_target=2000,
        goal_type=GoalType.GENERAL_FITNESS,
    )


@pytest.fixture
def metrics_factory():
    """Factory for DailyMetrics with everything unlogged by default"""
    def _create(day, **kwargs):
        if isinstance(day, str):
            day = date.fromisoformat(day)
        return DailyMetrics(date=day, **kwargs)

    return _create


@pytest.fixture
def great_day_metrics():
    """Metrics that meet steps, water and sleep goals"""
    return {"steps": 10000, "water_ml": 2500, "sleep_hours": 8.5}


# ============================================================================
# Gamification Fixtures
# ============================================================================

@pytest.fixture
def fixed_now():
    """Deterministic badge award timestamp"""
    return datetime(2024, 2, 1, 20, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def empty_snapshot(test_user_id):
    """Snapshot of a user seen for the first time"""
    return GamificationSnapshot.initial(test_user_id)


@pytest.fixture
def memory_store():
    """Fresh in-memory snapshot store"""
    return InMemoryGamificationStore()


@pytest.fixture
def gamification_service(memory_store):
    """GamificationService over the in-memory store"""
    return GamificationService(memory_store, max_conflict_retries=2)
