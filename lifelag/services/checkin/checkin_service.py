"""
Check-in persistence service.

MongoDB implementation of CheckinRepository. Pure storage - scoring and
streak/milestone rules live in lifelag.engine.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from lifelag.engine.types import CheckinSummary, Milestone, StreakState, as_utc
from lifelag.services.checkin.repository import CheckinRepository

logger = logging.getLogger(__name__)


def _user_key(user_id: str) -> Union[ObjectId, str]:
    return ObjectId(user_id) if ObjectId.is_valid(user_id) else user_id


class CheckInService(CheckinRepository):
    """
    Stores check-ins, streaks and milestones in MongoDB.

    Collections:
        checkins: one document per submission
        streaks: one document per user
        milestones: unique on (userId, milestoneType, milestoneValue)
    """

    MAX_LIMIT = 104

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize CheckInService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._checkins_collection = db["checkins"]
        self._streaks_collection = db["streaks"]
        self._milestones_collection = db["milestones"]

    async def ensure_indexes(self) -> None:
        """Create the indexes the queries and milestone uniqueness rely on."""
        await self._checkins_collection.create_index(
            [("userId", ASCENDING), ("createdAt", DESCENDING)]
        )
        await self._streaks_collection.create_index("userId", unique=True)
        await self._milestones_collection.create_index(
            [("userId", ASCENDING), ("milestoneType", ASCENDING), ("milestoneValue", ASCENDING)],
            unique=True,
        )
        logger.info("Check-in indexes ensured")

    # ─────────────────────────────────────────────────────────────────
    # Check-ins
    # ─────────────────────────────────────────────────────────────────

    async def get_recent_checkins(self, user_id: str, limit: int) -> List[CheckinSummary]:
        """
        Get the latest check-ins for a user.

        Args:
            user_id: User ID
            limit: Max records to return (capped at MAX_LIMIT)

        Returns:
            List of CheckinSummary, newest first
        """
        limit = min(limit, self.MAX_LIMIT)

        cursor = self._checkins_collection.find({"userId": _user_key(user_id)})
        cursor = cursor.sort("createdAt", -1)
        cursor = cursor.limit(limit)

        documents = await cursor.to_list(length=limit)
        return [self._to_summary(doc) for doc in documents]

    async def count_checkins(self, user_id: str) -> int:
        return await self._checkins_collection.count_documents({"userId": _user_key(user_id)})

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
        """
        Store a scored check-in.

        Returns:
            The stored check-in as a CheckinSummary
        """
        document = {
            "userId": _user_key(user_id),
            "answers": dict(answers),
            "lagScore": lag_score,
            "driftCategory": drift_category,
            "weakestDimension": weakest_dimension,
            "scoreDelta": score_delta,
            "createdAt": created_at,
        }

        result = await self._checkins_collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(f"Check-in stored for user {user_id}: score={lag_score} ({drift_category})")
        return self._to_summary(document)

    # ─────────────────────────────────────────────────────────────────
    # Streaks
    # ─────────────────────────────────────────────────────────────────

    async def get_streak(self, user_id: str) -> StreakState:
        document = await self._streaks_collection.find_one({"userId": _user_key(user_id)})
        if not document:
            return StreakState()

        return StreakState(
            current_streak=document.get("currentStreak", 0),
            last_checkin_at=as_utc(document.get("lastCheckinAt")),
        )

    async def upsert_streak(self, user_id: str, current_streak: int, last_checkin_at: datetime) -> None:
        now = datetime.now(timezone.utc)

        await self._streaks_collection.update_one(
            {"userId": _user_key(user_id)},
            {
                "$set": {
                    "currentStreak": current_streak,
                    "lastCheckinAt": last_checkin_at,
                    "updatedAt": now,
                },
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
        )
        logger.info(f"Streak updated for user {user_id}: {current_streak}")

    # ─────────────────────────────────────────────────────────────────
    # Milestones
    # ─────────────────────────────────────────────────────────────────

    async def get_milestones(self, user_id: str) -> List[Milestone]:
        cursor = self._milestones_collection.find({"userId": _user_key(user_id)})
        cursor = cursor.sort("achievedAt", 1)

        documents = await cursor.to_list(length=None)
        return [self._to_milestone(doc) for doc in documents]

    async def add_milestones(
        self,
        user_id: str,
        milestones: List[Dict[str, Any]],
        achieved_at: datetime,
    ) -> List[Milestone]:
        """
        Record new milestones, skipping (type, value) pairs already stored.

        Args:
            user_id: User ID
            milestones: list of {"type", "value"} from check_new_milestones
            achieved_at: Time of the check-in that reached them

        Returns:
            Milestones that were newly inserted
        """
        recorded: List[Milestone] = []

        for milestone in milestones:
            key = {
                "userId": _user_key(user_id),
                "milestoneType": milestone["type"],
                "milestoneValue": milestone["value"],
            }
            result = await self._milestones_collection.update_one(
                key,
                {"$setOnInsert": {**key, "achievedAt": achieved_at}},
                upsert=True,
            )

            if result.upserted_id is None:
                logger.debug(f"Milestone already recorded for user {user_id}: {milestone}")
                continue

            recorded.append(Milestone(
                id=str(result.upserted_id),
                milestone_type=milestone["type"],
                milestone_value=milestone["value"],
                achieved_at=achieved_at,
            ))
            logger.info(f"Milestone recorded for user {user_id}: {milestone['type']}={milestone['value']}")

        return recorded

    # ─────────────────────────────────────────────────────────────────
    # Document mapping
    # ─────────────────────────────────────────────────────────────────

    def _to_summary(self, document: Dict[str, Any]) -> CheckinSummary:
        return CheckinSummary(
            id=str(document["_id"]),
            lag_score=document["lagScore"],
            drift_category=document["driftCategory"],
            weakest_dimension=document["weakestDimension"],
            created_at=as_utc(document["createdAt"]),
            score_delta=document.get("scoreDelta"),
        )

    def _to_milestone(self, document: Dict[str, Any]) -> Milestone:
        return Milestone(
            id=str(document["_id"]),
            milestone_type=document["milestoneType"],
            milestone_value=document["milestoneValue"],
            achieved_at=as_utc(document["achievedAt"]),
        )
