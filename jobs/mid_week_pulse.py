"""
Mid-week Quick Pulse background job.

Finds users who are in the middle of their check-in week and whose recent
check-ins call for a Quick Pulse. Delivery (push, email) is handled by
whoever consumes the results.

Usage:
    Run via CRON:
        0 9 * * * cd /path/to/project && python -m jobs.mid_week_pulse

    Or run directly:
        python -m jobs.mid_week_pulse
"""

import asyncio
import logging
import sys
from datetime import datetime, timezone, timedelta
from typing import Dict, Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from lifelag.config import settings
from lifelag.engine import is_middle_of_week, should_show_quick_pulse
from lifelag.engine.quick_pulse import MID_WEEK_MAX_DAYS
from lifelag.services.checkin.checkin_service import CheckInService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

PULSE_TITLE = "How's your week feeling?"
PULSE_MESSAGE = "Take a quick mid-week check to see where things stand."

RECENT_CHECKINS = 3


class MidWeekPulseJob:
    """
    Selects users eligible for a mid-week Quick Pulse prompt.

    A user is eligible when:
    1. Their latest check-in is 2-5 whole days old
    2. That check-in scored 45 or more, or the last three check-ins
       worsened step by step (score or drift category)
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize the job.

        Args:
            db: Application database
        """
        self._checkins = db["checkins"]
        self._checkin_service = CheckInService(db=db)

    async def run(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Execute the job.

        Returns:
            Dict with the eligible users, counts and any errors
        """
        logger.info("Starting mid-week pulse job")
        now = now or datetime.now(timezone.utc)

        results: Dict[str, Any] = {
            "startTime": now.isoformat(),
            "usersChecked": 0,
            "notifications": [],
            "errors": [],
        }

        # Mid-week users checked in at most MID_WEEK_MAX_DAYS whole days ago
        since = now - timedelta(days=MID_WEEK_MAX_DAYS + 1)
        user_ids = await self._checkins.distinct("userId", {"createdAt": {"$gte": since}})
        logger.info(f"Found {len(user_ids)} users with recent check-ins")

        for user_id in user_ids:
            results["usersChecked"] += 1
            try:
                notification = await self._evaluate_user(str(user_id), now)
            except Exception as e:
                error_msg = f"Failed to evaluate user {user_id}: {str(e)}"
                logger.error(error_msg)
                results["errors"].append(error_msg)
                continue

            if notification:
                results["notifications"].append(notification)

        logger.info(
            f"Mid-week pulse job completed. "
            f"Eligible: {len(results['notifications'])} of {results['usersChecked']} users, "
            f"Errors: {len(results['errors'])}"
        )

        return results

    async def _evaluate_user(self, user_id: str, now: datetime) -> Optional[Dict[str, Any]]:
        """
        Build the notification for a user, or None if not eligible.
        """
        recent = await self._checkin_service.get_recent_checkins(user_id, RECENT_CHECKINS)
        if not recent:
            return None

        latest = recent[0]
        if not is_middle_of_week(latest.created_at, now):
            return None

        if not should_show_quick_pulse(recent):
            return None

        logger.debug(f"User {user_id} eligible for mid-week pulse (score={latest.lag_score})")
        return {
            "userId": user_id,
            "title": PULSE_TITLE,
            "message": PULSE_MESSAGE,
            "weakestDimension": latest.weakest_dimension,
        }


async def main():
    """Run the job against the configured database."""
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    job = MidWeekPulseJob(client[settings.MONGODB_DATABASE])

    try:
        results = await job.run()

        print("\n=== Mid-Week Pulse Job Results ===")
        print(f"Start Time: {results['startTime']}")
        print(f"Users Checked: {results['usersChecked']}")
        print(f"Eligible Users: {len(results['notifications'])}")

        if results["errors"]:
            print(f"\nErrors ({len(results['errors'])}):")
            for error in results["errors"]:
                print(f"  - {error}")

        exit_code = 1 if results["errors"] else 0
        sys.exit(exit_code)

    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(main())
