"""
Pydantic models for Check-in request/response validation.

Responses use the {"success": true, "data": ...} envelope.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Literal
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class CheckinRequest(BaseModel):
    """POST /api/checkin"""
    # Ratings are checked by AnswersValidator so every answer error
    # carries the same VALIDATION_ERROR code
    answers: Dict[str, Any] = Field(..., description="Six dimension ratings, 1-5 scale")


class QuickPulseRequest(BaseModel):
    """POST /api/checkin/quick-pulse"""
    response: Literal["good", "adjusting", "struggling"]


# =============================================================================
# Response Data Schemas
# =============================================================================

class TipData(BaseModel):
    focus: str
    constraint: str
    choice: str


class MilestoneData(BaseModel):
    type: str
    value: int
    message: str
    achievedAt: Optional[datetime] = None


class CheckinResultData(BaseModel):
    """Response data for POST /api/checkin"""
    lagScore: int
    driftCategory: str
    weakestDimension: str
    tip: TipData
    continuityMessage: Optional[str] = None
    scoreDelta: Optional[int] = None
    streakCount: int
    streakMessage: Optional[str] = None
    checkinCount: int
    milestone: Optional[MilestoneData] = None
    milestones: List[MilestoneData] = []
    recovered: bool = False
    recoveryMessage: Optional[str] = None
    reassuranceMessage: str
    adaptiveTipMessage: Optional[str] = None


class CheckinSummaryData(BaseModel):
    id: str
    lagScore: int
    driftCategory: str
    weakestDimension: str
    createdAt: datetime
    scoreDelta: Optional[int] = None


class HistoryData(BaseModel):
    """Response data for GET /api/checkin/history"""
    checkins: List[CheckinSummaryData]
    count: int


class StreakData(BaseModel):
    """Response data for GET /api/checkin/streak"""
    streak: int
    message: Optional[str] = None
    isActive: bool
    daysUntilReset: Optional[int] = None
    lastCheckinAt: Optional[datetime] = None


class MilestonesData(BaseModel):
    """Response data for GET /api/checkin/milestones"""
    milestones: List[MilestoneData]


class QuickPulseStatusData(BaseModel):
    """Response data for GET /api/checkin/quick-pulse"""
    show: bool
    weakestDimension: Optional[str] = None


class MicroAdjustmentData(BaseModel):
    """Response data for POST /api/checkin/quick-pulse"""
    message: str
    actionLabel: Optional[str] = None
    actionLink: Optional[str] = None
    weakestDimension: str


class MicroGoalData(BaseModel):
    """Response data for GET /api/checkin/micro-goal"""
    suggestion: str
    weakestDimension: str


# =============================================================================
# Envelopes
# =============================================================================

class SubmitCheckinResponse(BaseModel):
    success: bool = True
    data: CheckinResultData


class HistoryResponse(BaseModel):
    success: bool = True
    data: HistoryData


class StreakResponse(BaseModel):
    success: bool = True
    data: StreakData


class MilestonesResponse(BaseModel):
    success: bool = True
    data: MilestonesData


class QuickPulseStatusResponse(BaseModel):
    success: bool = True
    data: QuickPulseStatusData


class MicroAdjustmentResponse(BaseModel):
    success: bool = True
    data: MicroAdjustmentData


class MicroGoalResponse(BaseModel):
    success: bool = True
    data: MicroGoalData
