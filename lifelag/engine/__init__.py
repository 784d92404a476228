"""Life Lag scoring, trend and behavioral-state engine."""

from lifelag.engine.types import (
    DIMENSIONS,
    DRIFT_CATEGORIES,
    Answers,
    CheckinEvaluation,
    CheckinSummary,
    MessageContext,
    MicroAdjustment,
    Milestone,
    StreakInfo,
    StreakState,
    Tip,
    TipFeedback,
    category_severity,
)
from lifelag.engine.scoring import calculate_lag_score, get_drift_category, get_weakest_dimension
from lifelag.engine.streaks import (
    calculate_soft_streak,
    format_streak_message,
    get_streak_info,
    describe_stored_streak,
)
from lifelag.engine.milestones import check_new_milestones, format_milestone_message
from lifelag.engine.continuity import (
    generate_continuity_message,
    detect_recovery,
    get_recovery_message,
)
from lifelag.engine.messaging import get_reassurance_message, pick_reassurance_message
from lifelag.engine.quick_pulse import (
    should_show_quick_pulse,
    is_middle_of_week,
    was_dismissed_this_week,
    get_micro_adjustment,
)
from lifelag.engine.micro_goals import (
    generate_micro_goal_suggestion,
    get_current_week_start,
    is_current_week_goal,
)
from lifelag.engine.tips import get_tip, calculate_tip_score, get_adaptive_tip_message
from lifelag.engine.evaluation import evaluate_checkin

__all__ = [
    "DIMENSIONS",
    "DRIFT_CATEGORIES",
    "Answers",
    "CheckinEvaluation",
    "CheckinSummary",
    "MessageContext",
    "MicroAdjustment",
    "Milestone",
    "StreakInfo",
    "StreakState",
    "Tip",
    "TipFeedback",
    "category_severity",
    "calculate_lag_score",
    "get_drift_category",
    "get_weakest_dimension",
    "calculate_soft_streak",
    "format_streak_message",
    "get_streak_info",
    "describe_stored_streak",
    "check_new_milestones",
    "format_milestone_message",
    "generate_continuity_message",
    "detect_recovery",
    "get_recovery_message",
    "get_reassurance_message",
    "pick_reassurance_message",
    "should_show_quick_pulse",
    "is_middle_of_week",
    "was_dismissed_this_week",
    "get_micro_adjustment",
    "generate_micro_goal_suggestion",
    "get_current_week_start",
    "is_current_week_goal",
    "get_tip",
    "calculate_tip_score",
    "get_adaptive_tip_message",
    "evaluate_checkin",
]
