"""
FastAPI router for Check-in endpoints.

Provides weekly check-in submission, history, streak, milestones and the
mid-week Quick Pulse.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from lifelag.config import settings
from lifelag.dependencies import get_current_user_id, get_checkin_service
from lifelag.services.checkin.checkin_service import CheckInService
from lifelag.schemas.checkin import (
    CheckinRequest,
    QuickPulseRequest,
    SubmitCheckinResponse,
    HistoryResponse,
    StreakResponse,
    MilestonesResponse,
    QuickPulseStatusResponse,
    MicroAdjustmentResponse,
    MicroGoalResponse,
)
from lifelag.pipelines import checkin as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkin", tags=["checkin"])


@router.post("", response_model=SubmitCheckinResponse)
async def submit_checkin(
    body: CheckinRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """
    Submit a weekly check-in.

    Scores the answers, stores the check-in and returns the result with
    tip, streak, milestones and messaging.
    """
    result = await pipelines.submit_checkin_pipeline(
        repository=checkin_service,
        user_id=user_id,
        answers=body.answers,
        recent_window=settings.RECENT_CHECKINS_WINDOW,
    )

    return success_response(result)


@router.get("/history", response_model=HistoryResponse)
async def get_history(
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
    limit: int = Query(12, ge=1, le=settings.HISTORY_MAX_LIMIT),
):
    """Get the latest check-ins, newest first."""
    result = await pipelines.get_history_pipeline(
        repository=checkin_service,
        user_id=user_id,
        limit=limit
    )

    return success_response(result)


@router.get("/streak", response_model=StreakResponse)
async def get_streak(
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """Get the current maintenance streak."""
    result = await pipelines.get_streak_pipeline(
        repository=checkin_service,
        user_id=user_id
    )

    return success_response(result)


@router.get("/milestones", response_model=MilestonesResponse)
async def get_milestones(
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """Get all achieved milestones."""
    result = await pipelines.get_milestones_pipeline(
        repository=checkin_service,
        user_id=user_id
    )

    return success_response(result)


@router.get("/quick-pulse", response_model=QuickPulseStatusResponse)
async def get_quick_pulse(
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
    dismissedAt: Optional[str] = Query(None, description="ISO timestamp of last dismissal"),
):
    """
    Check whether the mid-week Quick Pulse should be shown.

    Dismissal is tracked client side and passed in as dismissedAt.
    """
    result = await pipelines.get_quick_pulse_pipeline(
        repository=checkin_service,
        user_id=user_id,
        dismissed_at=dismissedAt
    )

    return success_response(result)


@router.post(
    "/quick-pulse",
    response_model=MicroAdjustmentResponse,
    response_model_exclude_none=True,
)
async def submit_quick_pulse(
    body: QuickPulseRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """Answer the Quick Pulse and get a micro-adjustment."""
    result = await pipelines.submit_quick_pulse_pipeline(
        repository=checkin_service,
        user_id=user_id,
        response=body.response
    )

    return success_response(result)


@router.get("/micro-goal", response_model=MicroGoalResponse)
async def get_micro_goal(
    user_id: Annotated[str, Depends(get_current_user_id)],
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """Suggest a micro-goal for the weakest dimension."""
    result = await pipelines.get_micro_goal_pipeline(
        repository=checkin_service,
        user_id=user_id
    )

    return success_response(result)
