"""
Check-in repository interface.

Everything the check-in pipelines need from persistence. Implementations
own storage details; the engine only sees the dataclasses returned here.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Dict, Any, Optional

from lifelag.engine.types import CheckinSummary, Milestone, StreakState


class CheckinRepository(ABC):
    """
    Typed access to check-ins, streaks and milestones.

    Callers do the read-then-write of streak and milestone state for one
    user; implementations are not required to serialize concurrent
    submissions by the same user.
    """

    @abstractmethod
    async def get_recent_checkins(self, user_id: str, limit: int) -> List[CheckinSummary]:
        """Latest check-ins, newest first."""
        pass

    @abstractmethod
    async def count_checkins(self, user_id: str) -> int:
        pass

    @abstractmethod
    async def insert_checkin(
        self,
        user_id: str,
        answers: Dict[str, int],
        lag_score: int,
        drift_category: str,
        weakest_dimension: str,
        score_delta: Optional[int],
        created_at: datetime,
    ) -> CheckinSummary:
        """Store a scored check-in and return it as a summary."""
        pass

    @abstractmethod
    async def get_streak(self, user_id: str) -> StreakState:
        """Stored streak, or an empty StreakState for new users."""
        pass

    @abstractmethod
    async def upsert_streak(self, user_id: str, current_streak: int, last_checkin_at: datetime) -> None:
        pass

    @abstractmethod
    async def get_milestones(self, user_id: str) -> List[Milestone]:
        pass

    @abstractmethod
    async def add_milestones(
        self,
        user_id: str,
        milestones: List[Dict[str, Any]],
        achieved_at: datetime,
    ) -> List[Milestone]:
        """
        Record new milestones ({"type", "value"} dicts).

        Returns:
            The milestones that were actually recorded; pairs that already
            exist are skipped
        """
        pass
