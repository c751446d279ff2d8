"""Tests for configuration validation"""
import pytest

from healthquest import config
from healthquest.exceptions import ConfigurationError


@pytest.fixture
def valid_config(monkeypatch):
    """Pin known-good values regardless of the local environment"""
    monkeypatch.setattr(config, "DEFAULT_TIMEZONE", "UTC")
    monkeypatch.setattr(config, "DEFAULT_STEPS_TARGET", 8000)
    monkeypatch.setattr(config, "DEFAULT_WATER_ML_TARGET", 2000)
    monkeypatch.setattr(config, "DEFAULT_SLEEP_HOURS_TARGET", 8.0)
    monkeypatch.setattr(config, "DEFAULT_WORKOUTS_PER_WEEK_TARGET", 3)
    monkeypatch.setattr(config, "DEFAULT_CALORIES_TARGET", 2000)
    monkeypatch.setattr(config, "DEFAULT_GOAL_TYPE", "general_fitness")
    monkeypatch.setattr(config, "STATE_CONFLICT_MAX_RETRIES", 3)
    return monkeypatch


class TestConfigValidation:
    """Test validate_config"""

    def test_valid_configuration(self, valid_config):
        """Test that default values pass validation"""
        config.validate_config()

    def test_negative_target_rejected(self, valid_config):
        valid_config.setattr(config, "DEFAULT_STEPS_TARGET", -1)

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "DEFAULT_STEPS_TARGET"

    def test_workouts_per_week_above_seven_rejected(self, valid_config):
        valid_config.setattr(config, "DEFAULT_WORKOUTS_PER_WEEK_TARGET", 8)

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "DEFAULT_WORKOUTS_PER_WEEK_TARGET"

    def test_unknown_goal_type_rejected(self, valid_config):
        valid_config.setattr(config, "DEFAULT_GOAL_TYPE", "bulk_forever")

        with pytest.raises(ConfigurationError):
            config.validate_config()

    def test_unknown_timezone_rejected(self, valid_config):
        valid_config.setattr(config, "DEFAULT_TIMEZONE", "Mars/Olympus_Mons")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_config()

        assert exc_info.value.config_key == "DEFAULT_TIMEZONE"


def test_goal_defaults_follow_config(monkeypatch):
    """Test build_goals reads defaults at call time"""
    from healthquest.models.metrics import build_goals

    monkeypatch.setattr(config, "DEFAULT_STEPS_TARGET", 10000)

    assert build_goals().steps_target == 10000


class TestConfigureLogging:
    """Test configure_logging"""

    def test_uses_configured_level_by_default(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(config, "LOG_LEVEL", "warning")

        config.configure_logging()

        assert calls[0]["level"] == "WARNING"

    def test_explicit_level_wins(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        config.configure_logging("debug")

        assert calls[0]["level"] == "DEBUG"
        assert "%(name)s" in calls[0]["format"]
