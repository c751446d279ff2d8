"""Gamification state models"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from healthquest.models.achievement import UserBadge


class GamificationState(BaseModel):
    """Per-user XP, level and completion streak"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    xp: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    completion_streak: int = Field(default=0, ge=0)
    last_completed_date: Optional[date] = None

    @classmethod
    def initial(cls, user_id: str) -> "GamificationState":
        """Zero state for a user seen for the first time"""
        return cls(user_id=user_id)


class DailyQuest(BaseModel):
    """One quest row, unique per (user_id, date, quest_id)"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    date: date
    quest_id: str
    title: str
    xp_reward: int = Field(gt=0)
    completed: bool = False


class EnsureOutcome(str, Enum):
    """Result of ensuring one quest row exists"""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


class GamificationSnapshot(BaseModel):
    """
    Everything a quest transition reads and writes, as one unit

    quests holds the rows of a single date; badges is the earned set.
    """
    model_config = ConfigDict(frozen=True)

    state: GamificationState
    quests: tuple[DailyQuest, ...] = ()
    badges: tuple[UserBadge, ...] = ()

    @classmethod
    def initial(cls, user_id: str) -> "GamificationSnapshot":
        return cls(state=GamificationState.initial(user_id))

    @property
    def user_id(self) -> str:
        return self.state.user_id

    @property
    def badge_ids(self) -> set[str]:
        return {badge.badge_id for badge in self.badges}

    def quest(self, quest_id: str) -> Optional[DailyQuest]:
        for quest in self.quests:
            if quest.quest_id == quest_id:
                return quest
        return None


class QuestAction(BaseModel):
    """
    A requested quest transition

    quest_id=None only ensures the day's quests exist.
    """
    model_config = ConfigDict(frozen=True)

    user_id: str
    date: date
    quest_id: Optional[str] = None
    completed: bool = True


class QuestTransitionResult(BaseModel):
    """New snapshot plus what changed, for messaging and logging"""
    model_config = ConfigDict(frozen=True)

    snapshot: GamificationSnapshot
    changed: bool = False
    ensured: dict[str, EnsureOutcome] = Field(default_factory=dict)
    xp_delta: int = 0
    bonus_awarded: bool = False
    new_badges: tuple[str, ...] = ()
    leveled_up: bool = False
    old_level: int = 1
    new_level: int = 1
    message: str = ""


class LevelProgress(BaseModel):
    """Where a cumulative XP total sits on the leveling curve"""
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1)
    xp_into_level: int = Field(ge=0)
    xp_needed: int = Field(gt=0)

    @property
    def xp_to_next_level(self) -> int:
        return max(0, self.xp_needed - self.xp_into_level)

    @property
    def percent(self) -> int:
        """Progress bar fill, 0-100"""
        pct = (200 * self.xp_into_level + self.xp_needed) // (2 * self.xp_needed)
        return min(100, pct)
