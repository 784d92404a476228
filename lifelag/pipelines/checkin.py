"""
Check-in pipeline functions.

Stateless orchestration: read prior state from the repository, run the
engine, persist results and format the API payload.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from common.utils.exceptions import ValidationException, NotFoundException
from lifelag.engine import (
    CheckinEvaluation,
    CheckinSummary,
    Milestone,
    evaluate_checkin,
    describe_stored_streak,
    format_milestone_message,
    should_show_quick_pulse,
    is_middle_of_week,
    was_dismissed_this_week,
    get_micro_adjustment,
    generate_micro_goal_suggestion,
)
from lifelag.services.checkin.answers_validator import AnswersValidator
from lifelag.services.checkin.repository import CheckinRepository

logger = logging.getLogger(__name__)

QUICK_PULSE_HISTORY = 3


async def submit_checkin_pipeline(
    repository: CheckinRepository,
    user_id: str,
    answers: Dict[str, Any],
    recent_window: int = 5,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Orchestrates the check-in submission flow.

    Args:
        repository: Check-in persistence
        user_id: Current user's ID
        answers: The six ratings from the request
        recent_window: Prior check-ins to read for trends
        now: Submission time (defaults to now, UTC)

    Returns:
        CheckinResult dict

    Raises:
        ValidationException: Answers missing or out of range
    """
    is_valid, error = AnswersValidator.validate(answers)
    if not is_valid:
        raise ValidationException(message=error, code="VALIDATION_ERROR")

    now = now or datetime.now(timezone.utc)

    recent_checkins = await repository.get_recent_checkins(user_id, recent_window)
    streak_state = await repository.get_streak(user_id)
    existing_milestones = await repository.get_milestones(user_id)
    previous_count = await repository.count_checkins(user_id)

    evaluation = evaluate_checkin(
        answers=answers,
        recent_checkins=recent_checkins,
        streak_state=streak_state,
        existing_milestones=existing_milestones,
        previous_checkin_count=previous_count,
        now=now,
    )

    await repository.insert_checkin(
        user_id=user_id,
        answers=answers,
        lag_score=evaluation.lag_score,
        drift_category=evaluation.drift_category,
        weakest_dimension=evaluation.weakest_dimension,
        score_delta=evaluation.score_delta,
        created_at=now,
    )

    # The check-in is stored; streak and milestone writes must not fail it
    try:
        await repository.upsert_streak(user_id, evaluation.streak_count, now)
    except Exception as e:
        logger.warning(f"Failed to update streak for user {user_id}: {e}")

    recorded: List[Milestone] = []
    if evaluation.new_milestones:
        try:
            recorded = await repository.add_milestones(user_id, evaluation.new_milestones, now)
        except Exception as e:
            logger.warning(f"Failed to record milestones for user {user_id}: {e}")

    return _format_result(evaluation, recorded)


async def get_history_pipeline(
    repository: CheckinRepository,
    user_id: str,
    limit: int = 12
) -> Dict[str, Any]:
    """
    Get the latest check-ins.

    Returns:
        dict with checkins (newest first) and count
    """
    checkins = await repository.get_recent_checkins(user_id, limit)

    return {
        "checkins": [_format_checkin(c) for c in checkins],
        "count": len(checkins),
    }


async def get_streak_pipeline(
    repository: CheckinRepository,
    user_id: str,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """Get the stored streak with display metadata."""
    streak_state = await repository.get_streak(user_id)
    info = describe_stored_streak(streak_state, now)

    return {
        "streak": info.count,
        "message": info.message,
        "isActive": info.is_active,
        "daysUntilReset": info.days_until_reset,
        "lastCheckinAt": streak_state.last_checkin_at,
    }


async def get_milestones_pipeline(
    repository: CheckinRepository,
    user_id: str
) -> Dict[str, Any]:
    """Get recorded milestones, oldest first, with display messages."""
    milestones = await repository.get_milestones(user_id)

    return {
        "milestones": [
            {**_format_milestone(m.milestone_type, m.milestone_value), "achievedAt": m.achieved_at}
            for m in milestones
        ]
    }


async def get_quick_pulse_pipeline(
    repository: CheckinRepository,
    user_id: str,
    dismissed_at: Optional[str] = None,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Decide whether to show the mid-week Quick Pulse prompt.

    Shown when the last check-in is 2-5 days old, the recent trend calls
    for it and the user has not dismissed it in the last 7 days.

    Args:
        repository: Check-in persistence
        user_id: Current user's ID
        dismissed_at: ISO timestamp of the last dismissal held by the client
        now: Evaluation time (defaults to now, UTC)

    Returns:
        dict with show flag and the latest weakest dimension
    """
    recent = await repository.get_recent_checkins(user_id, QUICK_PULSE_HISTORY)
    if not recent:
        return {"show": False, "weakestDimension": None}

    latest = recent[0]
    show = (
        not was_dismissed_this_week(dismissed_at, now)
        and is_middle_of_week(latest.created_at, now)
        and should_show_quick_pulse(recent)
    )

    return {"show": show, "weakestDimension": latest.weakest_dimension}


async def submit_quick_pulse_pipeline(
    repository: CheckinRepository,
    user_id: str,
    response: str
) -> Dict[str, Any]:
    """
    Map a Quick Pulse response to a micro-adjustment.

    Raises:
        NotFoundException: User has no check-ins yet
    """
    latest = await _get_latest_checkin(repository, user_id)

    adjustment = get_micro_adjustment(response, latest.weakest_dimension, latest.lag_score)
    logger.debug(f"Quick pulse '{response}' for user {user_id} ({latest.weakest_dimension})")

    return {**adjustment.to_dict(), "weakestDimension": latest.weakest_dimension}


async def get_micro_goal_pipeline(
    repository: CheckinRepository,
    user_id: str,
    rng: Optional[random.Random] = None
) -> Dict[str, Any]:
    """
    Suggest a micro-goal for the latest weakest dimension.

    Raises:
        NotFoundException: User has no check-ins yet
    """
    latest = await _get_latest_checkin(repository, user_id)

    return {
        "suggestion": generate_micro_goal_suggestion(latest.weakest_dimension, rng),
        "weakestDimension": latest.weakest_dimension,
    }


async def _get_latest_checkin(repository: CheckinRepository, user_id: str) -> CheckinSummary:
    recent = await repository.get_recent_checkins(user_id, 1)
    if not recent:
        raise NotFoundException("Complete a check-in first", code="NO_CHECKINS")
    return recent[0]


def _format_milestone(milestone_type: str, value: int) -> Dict[str, Any]:
    return {
        "type": milestone_type,
        "value": value,
        "message": format_milestone_message(milestone_type, value),
    }


def _format_checkin(checkin: CheckinSummary) -> Dict[str, Any]:
    """Format a check-in summary for API response."""
    return {
        "id": checkin.id,
        "lagScore": checkin.lag_score,
        "driftCategory": checkin.drift_category,
        "weakestDimension": checkin.weakest_dimension,
        "createdAt": checkin.created_at,
        "scoreDelta": checkin.score_delta,
    }


def _format_result(evaluation: CheckinEvaluation, recorded: List[Milestone]) -> Dict[str, Any]:
    """Format an evaluation as the CheckinResult payload."""
    milestones = [_format_milestone(m.milestone_type, m.milestone_value) for m in recorded]

    return {
        "lagScore": evaluation.lag_score,
        "driftCategory": evaluation.drift_category,
        "weakestDimension": evaluation.weakest_dimension,
        "tip": evaluation.tip.to_dict(),
        "continuityMessage": evaluation.continuity_message,
        "scoreDelta": evaluation.score_delta,
        "streakCount": evaluation.streak_count,
        "streakMessage": evaluation.streak_message,
        "checkinCount": evaluation.checkin_count,
        "milestone": milestones[0] if milestones else None,
        "milestones": milestones,
        "recovered": evaluation.recovered,
        "recoveryMessage": evaluation.recovery_message,
        "reassuranceMessage": evaluation.reassurance_message,
        "adaptiveTipMessage": evaluation.adaptive_tip_message,
    }
