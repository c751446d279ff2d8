"""
GamificationService - Quest, XP and Badge Business Logic

Runs quest transitions against a snapshot store. The transition itself is
pure (gamification.engine); this service adds:
- Single writer per user (one asyncio.Lock per user id)
- Optimistic versioned write-back with bounded retry on conflicts
- Auto-completion of quests from logged metrics
- Display-ready daily view
"""

import asyncio
import logging
import weakref
from datetime import date
from typing import Any, Dict, List, Optional

from healthquest import config
from healthquest.exceptions import HealthQuestError, StateConflictError, StorageError
from healthquest.gamification.achievement_system import get_badge, split_catalog
from healthquest.gamification.engine import apply_quest_transition
from healthquest.gamification.motivation import get_daily_quote
from healthquest.gamification.quests import quests_satisfied_by
from healthquest.gamification.store import GamificationStore, VersionedSnapshot
from healthquest.gamification.xp_system import level_from_xp
from healthquest.models.gamification import GamificationSnapshot, QuestAction, QuestTransitionResult
from healthquest.models.metrics import DailyMetrics

logger = logging.getLogger(__name__)


class GamificationService:
    """
    Service for quest progression.

    Responsibilities:
    - Ensuring daily quests exist
    - Completing / un-completing quests
    - Persisting XP, level, streak and badges as one snapshot
    - Serializing writers for the same user
    """

    def __init__(self, store: GamificationStore, max_conflict_retries: Optional[int] = None):
        """
        Initialize GamificationService.

        Args:
            store: Snapshot store
            max_conflict_retries: Replays after a version conflict
                (defaults to config.STATE_CONFLICT_MAX_RETRIES)
        """
        self.store = store
        self.max_conflict_retries = (
            config.STATE_CONFLICT_MAX_RETRIES if max_conflict_retries is None else max_conflict_retries
        )
        # Entries vanish once no coroutine holds or waits on the lock
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()
        logger.debug("GamificationService initialized")

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

    async def _load(self, user_id: str, day: date, operation: str) -> VersionedSnapshot:
        try:
            return await self.store.load(user_id, day)
        except HealthQuestError:
            raise
        except Exception as e:
            raise StorageError(
                f"Failed to load gamification state: {e}",
                user_id=user_id,
                operation=operation,
                cause=e,
            )

    async def _save(self, snapshot: GamificationSnapshot, version: int, operation: str) -> int:
        try:
            return await self.store.save(snapshot, version)
        except HealthQuestError:
            raise
        except Exception as e:
            raise StorageError(
                f"Failed to save gamification state: {e}",
                user_id=snapshot.user_id,
                operation=operation,
                cause=e,
            )

    async def _run(self, action: QuestAction, operation: str) -> QuestTransitionResult:
        """Load, apply and write back one action, replaying on conflicts"""
        lock = self._lock_for(action.user_id)
        async with lock:
            attempt = 0
            while True:
                loaded = await self._load(action.user_id, action.date, operation)
                result = apply_quest_transition(loaded.snapshot, action)
                if not result.changed:
                    return result

                try:
                    await self._save(result.snapshot, loaded.version, operation)
                    return result
                except StateConflictError:
                    if attempt >= self.max_conflict_retries:
                        raise
                    attempt += 1
                    logger.warning(
                        f"Conflict saving gamification state for user {action.user_id} "
                        f"({operation}), retry {attempt}/{self.max_conflict_retries}"
                    )

    async def complete_quest(self, user_id: str, quest_id: str, day: date) -> Dict[str, Any]:
        """
        Mark a quest complete and award its XP (plus the daily bonus when
        it is the last open quest of the day).

        Returns:
            {
                'changed': bool,
                'xp_awarded': int,
                'bonus_awarded': bool,
                'level_up': bool,
                'new_level': int,
                'current_streak': int,
                'badges_unlocked': list,
                'message': str
            }
        """
        action = QuestAction(user_id=user_id, date=day, quest_id=quest_id, completed=True)
        result = await self._run(action, "complete_quest")
        return self._format_result(result)

    async def uncomplete_quest(self, user_id: str, quest_id: str, day: date) -> Dict[str, Any]:
        """Reopen a quest, taking back its XP (bonus, streak and badges stay)"""
        action = QuestAction(user_id=user_id, date=day, quest_id=quest_id, completed=False)
        result = await self._run(action, "uncomplete_quest")
        return self._format_result(result)

    async def sync_quests_from_metrics(self, user_id: str, metrics: DailyMetrics) -> List[Dict[str, Any]]:
        """
        Complete every quest whose metric is already logged for the day

        Returns:
            One result per quest that changed
        """
        results = []
        for quest_id in quests_satisfied_by(metrics):
            action = QuestAction(user_id=user_id, date=metrics.date, quest_id=quest_id, completed=True)
            result = await self._run(action, "sync_quests_from_metrics")
            if result.xp_delta or result.bonus_awarded:
                results.append(self._format_result(result))
        return results

    async def get_daily_view(self, user_id: str, day: date) -> Dict[str, Any]:
        """
        Today's quests and progression, creating the day's quests if needed

        Returns:
            {
                'date': date,
                'xp': int,
                'level': int,
                'xp_into_level': int,
                'xp_needed': int,
                'level_percent': int,
                'streak': int,
                'quests': list,
                'completed_quests': int,
                'badges_earned': list,
                'badges_locked': list,
                'quote': str
            }
        """
        result = await self._run(QuestAction(user_id=user_id, date=day), "get_daily_view")
        snapshot = result.snapshot
        state = snapshot.state
        progress = level_from_xp(state.xp)
        earned, locked = split_catalog(snapshot.badges)

        return {
            'date': day,
            'xp': state.xp,
            'level': progress.level,
            'xp_into_level': progress.xp_into_level,
            'xp_needed': progress.xp_needed,
            'level_percent': progress.percent,
            'streak': state.completion_streak,
            'quests': [quest.model_dump() for quest in snapshot.quests],
            'completed_quests': sum(1 for quest in snapshot.quests if quest.completed),
            'badges_earned': [badge.model_dump() for badge in earned],
            'badges_locked': [badge.model_dump() for badge in locked],
            'quote': get_daily_quote(day),
        }

    def _format_result(self, result: QuestTransitionResult) -> Dict[str, Any]:
        state = result.snapshot.state
        return {
            'changed': result.changed,
            'xp_awarded': result.xp_delta,
            'bonus_awarded': result.bonus_awarded,
            'level_up': result.leveled_up,
            'new_level': result.new_level,
            'total_xp': state.xp,
            'current_streak': state.completion_streak,
            'badges_unlocked': [
                get_badge(badge_id).model_dump() for badge_id in result.new_badges
            ],
            'message': result.message,
        }
