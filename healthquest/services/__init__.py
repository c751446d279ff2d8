"""
Service Layer Package

Business logic services between callers (API handlers, bots, jobs) and the
pure scoring/gamification engine.

Core Services:
- GamificationService: Daily quests, XP, streaks, badges (serialized per user)
- ProgressService: History, analytics and dashboard scoring views
"""

from healthquest.services.gamification_service import GamificationService
from healthquest.services.progress_service import ProgressService

__all__ = [
    "GamificationService",
    "ProgressService",
]
