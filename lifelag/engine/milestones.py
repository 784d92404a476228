"""
Milestone detection.

Detects check-in count, streak and recovery milestones that were reached
by the latest check-in and have not been recorded yet.
"""

from typing import List, Dict, Any, Sequence

from lifelag.engine.types import Milestone

CHECKIN_COUNT_MILESTONES = [4, 8, 12, 24, 52]

STREAK_MILESTONES = [4, 8, 12, 16, 32, 48]

RECOVERY_FROM_SCORE = 50
RECOVERY_TO_SCORE = 35

CHECKIN_COUNT_MESSAGES = {
    4: "4 check-ins completed",
    8: "2 months of self-maintenance",
    12: "3 months of self-maintenance",
    24: "6 months of self-maintenance",
    52: "1 year of self-maintenance",
}

STREAK_MESSAGES = {
    4: "1 month maintenance streak",
    8: "2 months maintenance streak",
    12: "3 months maintenance streak",
    16: "4 months maintenance streak",
    32: "8 months maintenance streak",
    48: "1 year maintenance streak",
}


def _is_recorded(existing: Sequence[Milestone], milestone_type: str, value: int) -> bool:
    return any(
        m.milestone_type == milestone_type and m.milestone_value == value
        for m in existing
    )


def check_new_milestones(
    existing_milestones: Sequence[Milestone],
    checkin_count: int,
    streak_count: int,
    recent_scores: Sequence[int]
) -> List[Dict[str, Any]]:
    """
    Find milestones reached by the current state that are not yet recorded.

    Count and streak milestones only fire on an exact match, so this must
    run once per new check-in.

    Args:
        existing_milestones: Milestones already recorded for the user
        checkin_count: Total check-ins including the current one
        streak_count: Streak after the current check-in
        recent_scores: Scores oldest to newest, ending with the current one

    Returns:
        List of {"type": str, "value": int}, possibly empty
    """
    new_milestones: List[Dict[str, Any]] = []

    for value in CHECKIN_COUNT_MILESTONES:
        if checkin_count == value and not _is_recorded(existing_milestones, "checkin_count", value):
            new_milestones.append({"type": "checkin_count", "value": value})

    for value in STREAK_MILESTONES:
        if streak_count == value and not _is_recorded(existing_milestones, "streak", value):
            new_milestones.append({"type": "streak", "value": value})

    if len(recent_scores) >= 2:
        previous_score = recent_scores[-2]
        current_score = recent_scores[-1]

        if previous_score > RECOVERY_FROM_SCORE and current_score < RECOVERY_TO_SCORE:
            if not _is_recorded(existing_milestones, "recovery", 1):
                new_milestones.append({"type": "recovery", "value": 1})

    return new_milestones


def format_milestone_message(milestone_type: str, milestone_value: int) -> str:
    """Neutral display text for a milestone."""
    if milestone_type == "checkin_count":
        return CHECKIN_COUNT_MESSAGES.get(
            milestone_value, f"{milestone_value} check-ins completed"
        )

    if milestone_type == "streak":
        return STREAK_MESSAGES.get(
            milestone_value, f"{milestone_value}-week maintenance streak"
        )

    if milestone_type == "recovery":
        return "Recovered from drift"

    return ""
