"""Badge models for gamification"""
from pydantic import BaseModel, ConfigDict
from datetime import datetime


class Badge(BaseModel):
    """Badge definition from the static catalog"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    description: str


class UserBadge(BaseModel):
    """A badge a user has earned (append-only)"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    badge_id: str
    earned_at: datetime
