"""
Gamification Snapshot Store

Boundary between the pure transition engine and persistence. A store hands
out a snapshot together with a version and only accepts a write-back whose
expected version still matches, so concurrent writers are detected instead
of silently overwriting each other.

InMemoryGamificationStore keeps everything in process memory (tests, single
process deployments). A database-backed store implements the same protocol.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from healthquest.exceptions import StateConflictError
from healthquest.models.achievement import UserBadge
from healthquest.models.gamification import DailyQuest, GamificationSnapshot, GamificationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionedSnapshot:
    snapshot: GamificationSnapshot
    version: int


class GamificationStore(Protocol):
    async def load(self, user_id: str, day: date) -> VersionedSnapshot:
        """Snapshot with that day's quests; zero state if the user is new"""
        ...

    async def save(self, snapshot: GamificationSnapshot, expected_version: int) -> int:
        """Write the snapshot atomically, returning the new version"""
        ...


class InMemoryGamificationStore:
    """In-process store with per-user optimistic versioning"""

    def __init__(self):
        self._states: dict[str, GamificationState] = {}
        self._badges: dict[str, tuple[UserBadge, ...]] = {}
        self._quests: dict[tuple[str, date], tuple[DailyQuest, ...]] = {}
        self._versions: dict[str, int] = {}

    async def load(self, user_id: str, day: date) -> VersionedSnapshot:
        state = self._states.get(user_id)
        if state is None:
            state = GamificationState.initial(user_id)
            logger.debug(f"No gamification state for user {user_id}, starting from zero")

        snapshot = GamificationSnapshot(
            state=state,
            quests=self._quests.get((user_id, day), ()),
            badges=self._badges.get(user_id, ()),
        )
        return VersionedSnapshot(snapshot=snapshot, version=self._versions.get(user_id, 0))

    async def save(self, snapshot: GamificationSnapshot, expected_version: int) -> int:
        user_id = snapshot.user_id
        current = self._versions.get(user_id, 0)
        if current != expected_version:
            raise StateConflictError(
                f"Gamification state for user {user_id} changed since it was read",
                expected_version=expected_version,
                actual_version=current,
                user_id=user_id,
                operation="save_snapshot",
            )

        # Badge rows are append-only; keep any already stored
        stored = self._badges.get(user_id, ())
        held = {badge.badge_id for badge in stored}
        merged = stored + tuple(badge for badge in snapshot.badges if badge.badge_id not in held)

        self._states[user_id] = snapshot.state
        self._badges[user_id] = merged
        for day in {quest.date for quest in snapshot.quests}:
            self._quests[(user_id, day)] = tuple(q for q in snapshot.quests if q.date == day)

        self._versions[user_id] = current + 1
        logger.debug(f"Saved gamification snapshot for user {user_id} (version {current + 1})")
        return current + 1

    def clear(self) -> None:
        self._states.clear()
        self._badges.clear()
        self._quests.clear()
        self._versions.clear()
