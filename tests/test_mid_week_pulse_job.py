"""Unit tests for the mid-week Quick Pulse job."""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock
from bson import ObjectId

from jobs.mid_week_pulse import MidWeekPulseJob, PULSE_MESSAGE


@pytest.fixture
def job(mock_db):
    return MidWeekPulseJob(mock_db)


class TestMidWeekPulseJob:
    @pytest.mark.asyncio
    async def test_selects_eligible_users(self, job, mock_collection, make_checkin, now):
        eligible_id, too_early_id, calm_id = ObjectId(), ObjectId(), ObjectId()
        mock_collection.distinct.return_value = [eligible_id, too_early_id, calm_id]

        recent_by_user = {
            str(eligible_id): [make_checkin(50, "moderate", "sleep", days_ago=3)],
            str(too_early_id): [make_checkin(50, "moderate", days_ago=1)],
            str(calm_id): [make_checkin(20, "mild", days_ago=3)],
        }
        job._checkin_service.get_recent_checkins = AsyncMock(
            side_effect=lambda user_id, limit: recent_by_user[user_id]
        )

        results = await job.run(now=now)

        assert results["usersChecked"] == 3
        assert results["errors"] == []
        assert results["notifications"] == [{
            "userId": str(eligible_id),
            "title": "How's your week feeling?",
            "message": PULSE_MESSAGE,
            "weakestDimension": "sleep",
        }]

        query = mock_collection.distinct.call_args[0][1]
        assert query["createdAt"]["$gte"] == now - timedelta(days=6)

    @pytest.mark.asyncio
    async def test_user_errors_are_collected(self, job, mock_collection, now):
        mock_collection.distinct.return_value = [ObjectId()]
        job._checkin_service.get_recent_checkins = AsyncMock(side_effect=RuntimeError("boom"))

        results = await job.run(now=now)

        assert results["notifications"] == []
        assert len(results["errors"]) == 1
        assert "boom" in results["errors"][0]

    @pytest.mark.asyncio
    async def test_no_recent_users(self, job, mock_collection, now):
        mock_collection.distinct.return_value = []

        results = await job.run(now=now)

        assert results["usersChecked"] == 0
        assert results["notifications"] == []
