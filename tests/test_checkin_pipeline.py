"""Unit tests for check-in pipelines (repository mocked)."""

import random
import pytest
from datetime import timedelta

from common.utils.exceptions import ValidationException, NotFoundException
from lifelag.engine.types import Milestone, StreakState
from lifelag.pipelines.checkin import (
    submit_checkin_pipeline,
    get_history_pipeline,
    get_streak_pipeline,
    get_milestones_pipeline,
    get_quick_pulse_pipeline,
    submit_quick_pulse_pipeline,
    get_micro_goal_pipeline,
)
from lifelag.engine.micro_goals import MICRO_GOAL_SUGGESTIONS


# ─────────────────────────────────────────────────────────────────
# submit_checkin_pipeline
# ─────────────────────────────────────────────────────────────────


class TestSubmitCheckinPipeline:
    @pytest.mark.asyncio
    async def test_invalid_answers_are_rejected(self, mock_repository, sample_user_id, make_answers):
        with pytest.raises(ValidationException) as exc_info:
            await submit_checkin_pipeline(mock_repository, sample_user_id, make_answers(3, sleep=9))

        assert exc_info.value.status_code == 422
        assert exc_info.value.code == "VALIDATION_ERROR"
        mock_repository.insert_checkin.assert_not_called()

    @pytest.mark.asyncio
    async def test_first_checkin(self, mock_repository, sample_user_id, make_answers, now):
        result = await submit_checkin_pipeline(
            mock_repository, sample_user_id, make_answers(1), now=now
        )

        assert result["lagScore"] == 80
        assert result["driftCategory"] == "critical"
        assert result["weakestDimension"] == "energy"
        assert result["tip"]["focus"] == "Immediate load reduction"
        assert result["checkinCount"] == 1
        assert result["streakCount"] == 0
        assert result["scoreDelta"] is None
        assert result["continuityMessage"] is None
        assert result["milestone"] is None
        assert result["milestones"] == []
        assert result["recovered"] is False

        mock_repository.get_recent_checkins.assert_awaited_once_with(sample_user_id, 5)
        mock_repository.insert_checkin.assert_awaited_once_with(
            user_id=sample_user_id,
            answers=make_answers(1),
            lag_score=80,
            drift_category="critical",
            weakest_dimension="energy",
            score_delta=None,
            created_at=now,
        )
        mock_repository.upsert_streak.assert_awaited_once_with(sample_user_id, 0, now)
        mock_repository.add_milestones.assert_not_called()

    @pytest.mark.asyncio
    async def test_records_milestones(self, mock_repository, sample_user_id, make_answers, make_checkin, now):
        mock_repository.get_recent_checkins.return_value = [make_checkin(30, "mild", days_ago=7)]
        mock_repository.count_checkins.return_value = 3
        mock_repository.get_streak.return_value = StreakState(3, now - timedelta(days=7))
        mock_repository.add_milestones.return_value = [
            Milestone("m1", "checkin_count", 4, now),
            Milestone("m2", "streak", 4, now),
        ]

        result = await submit_checkin_pipeline(
            mock_repository, sample_user_id, make_answers(4), now=now
        )

        assert result["lagScore"] == 20
        assert result["scoreDelta"] == -10
        assert result["continuityMessage"] == "Noticeable improvement from last week."
        assert result["streakCount"] == 4
        assert result["streakMessage"] == "4-week maintenance streak"
        assert result["checkinCount"] == 4
        assert result["milestone"] == {
            "type": "checkin_count",
            "value": 4,
            "message": "4 check-ins completed",
        }
        assert [m["type"] for m in result["milestones"]] == ["checkin_count", "streak"]

        mock_repository.add_milestones.assert_awaited_once_with(
            sample_user_id,
            [{"type": "checkin_count", "value": 4}, {"type": "streak", "value": 4}],
            now,
        )

    @pytest.mark.asyncio
    async def test_streak_write_failure_does_not_fail_submission(
        self, mock_repository, sample_user_id, make_answers, now
    ):
        mock_repository.upsert_streak.side_effect = RuntimeError("db down")

        result = await submit_checkin_pipeline(
            mock_repository, sample_user_id, make_answers(5), now=now
        )

        assert result["lagScore"] == 0
        assert result["streakCount"] == 1
        mock_repository.insert_checkin.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_milestone_write_failure_does_not_fail_submission(
        self, mock_repository, sample_user_id, make_answers, now
    ):
        mock_repository.count_checkins.return_value = 3
        mock_repository.add_milestones.side_effect = RuntimeError("duplicate key")

        result = await submit_checkin_pipeline(
            mock_repository, sample_user_id, make_answers(5), now=now
        )

        assert result["checkinCount"] == 4
        assert result["milestone"] is None
        assert result["milestones"] == []


# ─────────────────────────────────────────────────────────────────
# Read pipelines
# ─────────────────────────────────────────────────────────────────


class TestReadPipelines:
    @pytest.mark.asyncio
    async def test_history(self, mock_repository, sample_user_id, make_checkin):
        checkin = make_checkin(42, "moderate", "sleep", score_delta=4)
        mock_repository.get_recent_checkins.return_value = [checkin]

        result = await get_history_pipeline(mock_repository, sample_user_id, limit=10)

        assert result["count"] == 1
        assert result["checkins"][0] == {
            "id": checkin.id,
            "lagScore": 42,
            "driftCategory": "moderate",
            "weakestDimension": "sleep",
            "createdAt": checkin.created_at,
            "scoreDelta": 4,
        }
        mock_repository.get_recent_checkins.assert_awaited_once_with(sample_user_id, 10)

    @pytest.mark.asyncio
    async def test_streak(self, mock_repository, sample_user_id, now):
        last = now - timedelta(days=3)
        mock_repository.get_streak.return_value = StreakState(5, last)

        result = await get_streak_pipeline(mock_repository, sample_user_id, now=now)

        assert result == {
            "streak": 5,
            "message": "5-week maintenance streak",
            "isActive": True,
            "daysUntilReset": 4,
            "lastCheckinAt": last,
        }

    @pytest.mark.asyncio
    async def test_milestones(self, mock_repository, sample_user_id, now):
        mock_repository.get_milestones.return_value = [Milestone("m1", "recovery", 1, now)]

        result = await get_milestones_pipeline(mock_repository, sample_user_id)

        assert result["milestones"] == [{
            "type": "recovery",
            "value": 1,
            "message": "Recovered from drift",
            "achievedAt": now,
        }]


# ─────────────────────────────────────────────────────────────────
# Quick Pulse and micro-goals
# ─────────────────────────────────────────────────────────────────


class TestQuickPulsePipelines:
    @pytest.mark.asyncio
    async def test_no_checkins_hides_pulse(self, mock_repository, sample_user_id, now):
        result = await get_quick_pulse_pipeline(mock_repository, sample_user_id, now=now)

        assert result == {"show": False, "weakestDimension": None}

    @pytest.mark.asyncio
    async def test_mid_week_high_score_shows_pulse(self, mock_repository, sample_user_id, make_checkin, now):
        mock_repository.get_recent_checkins.return_value = [make_checkin(50, "moderate", "structure", days_ago=3)]

        result = await get_quick_pulse_pipeline(mock_repository, sample_user_id, now=now)

        assert result == {"show": True, "weakestDimension": "structure"}

    @pytest.mark.asyncio
    async def test_dismissed_hides_pulse(self, mock_repository, sample_user_id, make_checkin, now):
        mock_repository.get_recent_checkins.return_value = [make_checkin(50, "moderate", days_ago=3)]
        dismissed_at = (now - timedelta(days=1)).isoformat()

        result = await get_quick_pulse_pipeline(mock_repository, sample_user_id, dismissed_at, now=now)

        assert result["show"] is False

    @pytest.mark.asyncio
    async def test_outside_mid_week_hides_pulse(self, mock_repository, sample_user_id, make_checkin, now):
        mock_repository.get_recent_checkins.return_value = [make_checkin(50, "moderate", days_ago=1)]

        result = await get_quick_pulse_pipeline(mock_repository, sample_user_id, now=now)

        assert result["show"] is False

    @pytest.mark.asyncio
    async def test_submit_without_checkins(self, mock_repository, sample_user_id):
        with pytest.raises(NotFoundException) as exc_info:
            await submit_quick_pulse_pipeline(mock_repository, sample_user_id, "good")

        assert exc_info.value.code == "NO_CHECKINS"

    @pytest.mark.asyncio
    async def test_submit_adjusting(self, mock_repository, sample_user_id, make_checkin):
        mock_repository.get_recent_checkins.return_value = [make_checkin(40, "moderate", "sleep")]

        result = await submit_quick_pulse_pipeline(mock_repository, sample_user_id, "adjusting")

        assert result == {
            "message": "Set a sleep boundary tonight and honor it.",
            "actionLabel": "View settings",
            "actionLink": "/settings",
            "weakestDimension": "sleep",
        }

    @pytest.mark.asyncio
    async def test_micro_goal(self, mock_repository, sample_user_id, make_checkin):
        mock_repository.get_recent_checkins.return_value = [make_checkin(40, "moderate", "initiation")]

        result = await get_micro_goal_pipeline(mock_repository, sample_user_id, random.Random(5))

        assert result["weakestDimension"] == "initiation"
        assert result["suggestion"] in MICRO_GOAL_SUGGESTIONS["initiation"]

    @pytest.mark.asyncio
    async def test_micro_goal_without_checkins(self, mock_repository, sample_user_id):
        with pytest.raises(NotFoundException):
            await get_micro_goal_pipeline(mock_repository, sample_user_id)
