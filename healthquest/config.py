"""Configuration management"""
import logging
import os
from typing import Optional

import pytz
from dotenv import load_dotenv

from healthquest.exceptions import ConfigurationError

load_dotenv()

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Calendar day boundaries are computed in this timezone unless the caller passes one
DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "UTC")

# Goal defaults used when a user has not saved goals yet
DEFAULT_STEPS_TARGET: int = int(os.getenv("DEFAULT_STEPS_TARGET", "8000"))
DEFAULT_WATER_ML_TARGET: int = int(os.getenv("DEFAULT_WATER_ML_TARGET", "2000"))
DEFAULT_SLEEP_HOURS_TARGET: float = float(os.getenv("DEFAULT_SLEEP_HOURS_TARGET", "8"))
DEFAULT_WORKOUTS_PER_WEEK_TARGET: int = int(os.getenv("DEFAULT_WORKOUTS_PER_WEEK_TARGET", "3"))
DEFAULT_CALORIES_TARGET: int = int(os.getenv("DEFAULT_CALORIES_TARGET", "2000"))
DEFAULT_GOAL_TYPE: str = os.getenv("DEFAULT_GOAL_TYPE", "general_fitness")

# How many times a quest transition is replayed after a concurrent write
STATE_CONFLICT_MAX_RETRIES: int = int(os.getenv("STATE_CONFLICT_MAX_RETRIES", "3"))


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for processes embedding the engine"""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    for key, value in (
        ("DEFAULT_STEPS_TARGET", DEFAULT_STEPS_TARGET),
        ("DEFAULT_WATER_ML_TARGET", DEFAULT_WATER_ML_TARGET),
        ("DEFAULT_SLEEP_HOURS_TARGET", DEFAULT_SLEEP_HOURS_TARGET),
        ("DEFAULT_CALORIES_TARGET", DEFAULT_CALORIES_TARGET),
        ("STATE_CONFLICT_MAX_RETRIES", STATE_CONFLICT_MAX_RETRIES),
    ):
        if value < 0:
            raise ConfigurationError(f"{key} must be >= 0, got {value}", config_key=key)

    if not 0 <= DEFAULT_WORKOUTS_PER_WEEK_TARGET <= 7:
        raise ConfigurationError(
            f"DEFAULT_WORKOUTS_PER_WEEK_TARGET must be between 0 and 7, got {DEFAULT_WORKOUTS_PER_WEEK_TARGET}",
            config_key="DEFAULT_WORKOUTS_PER_WEEK_TARGET",
        )

    if DEFAULT_GOAL_TYPE not in ("general_fitness", "fat_loss", "muscle_gain", "endurance"):
        raise ConfigurationError(
            f"Unknown DEFAULT_GOAL_TYPE '{DEFAULT_GOAL_TYPE}'",
            config_key="DEFAULT_GOAL_TYPE",
        )

    try:
        pytz.timezone(DEFAULT_TIMEZONE)
    except pytz.exceptions.UnknownTimeZoneError as e:
        raise ConfigurationError(
            f"Unknown DEFAULT_TIMEZONE '{DEFAULT_TIMEZONE}'",
            config_key="DEFAULT_TIMEZONE",
            cause=e,
        )
