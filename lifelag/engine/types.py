"""
Type definitions for the Life Lag engine.

Contains the dimension/category vocabularies and the dataclasses passed
between engine components and the persistence layer.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any


# Canonical dimension order. Tie-breaks depend on it, do not reorder.
DIMENSIONS = (
    "energy",
    "sleep",
    "structure",
    "initiation",
    "engagement",
    "sustainability",
)

# Ordered by severity, index == severity.
DRIFT_CATEGORIES = ("aligned", "mild", "moderate", "heavy", "critical")

# Answers: dimension name -> rating 1-5
Answers = Dict[str, int]


def category_severity(category: str) -> int:
    """Severity index of a drift category (aligned=0 ... critical=4)."""
    return DRIFT_CATEGORIES.index(category)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC (Mongo stores and returns naive UTC)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class CheckinSummary:
    """A stored check-in as read back from persistence."""
    id: str
    lag_score: int
    drift_category: str
    weakest_dimension: str
    created_at: datetime
    score_delta: Optional[int] = None


@dataclass
class StreakState:
    """Per-user streak counter."""
    current_streak: int = 0
    last_checkin_at: Optional[datetime] = None


@dataclass
class Milestone:
    """A recorded milestone. (milestone_type, milestone_value) is unique per user."""
    id: str
    milestone_type: str  # "checkin_count" | "streak" | "recovery"
    milestone_value: int
    achieved_at: datetime


@dataclass(frozen=True)
class MicroAdjustment:
    """Suggestion returned for a Quick Pulse response."""
    message: str
    action_label: Optional[str] = None
    action_link: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message}
        if self.action_label:
            data["actionLabel"] = self.action_label
        if self.action_link:
            data["actionLink"] = self.action_link
        return data


@dataclass(frozen=True)
class Tip:
    """Weekly tip for a (dimension, category) pair."""
    focus: str
    constraint: str
    choice: str

    def to_dict(self) -> Dict[str, str]:
        return {"focus": self.focus, "constraint": self.constraint, "choice": self.choice}


@dataclass
class TipFeedback:
    """User feedback on a tip they received."""
    dimension: str
    category: str
    feedback: str  # "helpful" | "didnt_try" | "not_relevant"
    created_at: datetime


@dataclass
class StreakInfo:
    """Streak count plus display metadata."""
    count: int
    message: Optional[str]
    is_active: bool
    was_just_broken: bool
    days_until_reset: Optional[int]


@dataclass
class MessageContext:
    """Context used to vary reassurance messages."""
    checkin_count: Optional[int] = None
    streak_count: Optional[int] = None
    recent_trend: Optional[str] = None  # "improving" | "declining" | "stable"
    previous_message: Optional[str] = None


@dataclass
class CheckinEvaluation:
    """Everything computed for one check-in submission."""
    lag_score: int
    drift_category: str
    weakest_dimension: str
    tip: Tip
    streak_count: int
    checkin_count: int
    reassurance_message: str
    recovered: bool = False
    score_delta: Optional[int] = None
    continuity_message: Optional[str] = None
    streak_message: Optional[str] = None
    recovery_message: Optional[str] = None
    adaptive_tip_message: Optional[str] = None
    new_milestones: List[Dict[str, Any]] = field(default_factory=list)
