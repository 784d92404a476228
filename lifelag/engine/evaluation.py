"""
Check-in evaluation.

Composes the engine components into the full result of one check-in
submission. Pure: all prior state comes in as arguments and the caller
persists whatever comes out.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from lifelag.engine.types import (
    Answers,
    CheckinEvaluation,
    CheckinSummary,
    Milestone,
    StreakState,
)
from lifelag.engine.scoring import (
    calculate_lag_score,
    get_drift_category,
    get_weakest_dimension,
)
from lifelag.engine.streaks import calculate_soft_streak, format_streak_message
from lifelag.engine.milestones import check_new_milestones
from lifelag.engine.continuity import (
    generate_continuity_message,
    detect_recovery,
    get_recovery_message,
)
from lifelag.engine.messaging import get_reassurance_message
from lifelag.engine.tips import get_tip, get_adaptive_tip_message

logger = logging.getLogger(__name__)


def evaluate_checkin(
    answers: Answers,
    recent_checkins: Sequence[CheckinSummary],
    streak_state: StreakState,
    existing_milestones: Sequence[Milestone],
    previous_checkin_count: int,
    now: Optional[datetime] = None
) -> CheckinEvaluation:
    """
    Evaluate a new check-in against the user's prior state.

    Args:
        answers: The six ratings of the new check-in
        recent_checkins: Prior check-ins, newest first, excluding this one
        streak_state: Streak as stored before this check-in
        existing_milestones: Milestones already recorded
        previous_checkin_count: Number of check-ins before this one
        now: Submission time (defaults to now, UTC)

    Returns:
        CheckinEvaluation with score, category, tip, streak, new
        milestones and all messages
    """
    now = now or datetime.now(timezone.utc)

    lag_score = calculate_lag_score(answers)
    drift_category = get_drift_category(lag_score)
    weakest_dimension = get_weakest_dimension(answers)

    previous = recent_checkins[0] if recent_checkins else None
    previous_score = previous.lag_score if previous else None
    score_delta = lag_score - previous_score if previous_score is not None else None

    streak_count = calculate_soft_streak(
        lag_score,
        streak_state.current_streak,
        streak_state.last_checkin_at,
        now,
    )

    checkin_count = previous_checkin_count + 1
    recent_scores = [previous_score, lag_score] if previous_score is not None else [lag_score]
    new_milestones = check_new_milestones(
        existing_milestones, checkin_count, streak_count, recent_scores
    )

    recovered = detect_recovery(lag_score, previous_score)

    logger.debug(
        f"Evaluated check-in: score={lag_score} category={drift_category} "
        f"weakest={weakest_dimension} streak={streak_count} milestones={len(new_milestones)}"
    )

    return CheckinEvaluation(
        lag_score=lag_score,
        drift_category=drift_category,
        weakest_dimension=weakest_dimension,
        tip=get_tip(weakest_dimension, drift_category),
        streak_count=streak_count,
        checkin_count=checkin_count,
        reassurance_message=get_reassurance_message(drift_category),
        recovered=recovered,
        score_delta=score_delta,
        continuity_message=generate_continuity_message(lag_score, previous_score, score_delta),
        streak_message=format_streak_message(streak_count),
        recovery_message=get_recovery_message() if recovered else None,
        adaptive_tip_message=get_adaptive_tip_message(
            weakest_dimension, [c.weakest_dimension for c in recent_checkins]
        ),
        new_milestones=new_milestones,
    )
