"""
Week-over-week continuity and recovery messages.

A negative delta means the score went down, which is an improvement.
"""

from typing import Optional

STABLE_BAND = 3
SLIGHT_BAND = 8
NOTICEABLE_BAND = 15

RECOVERY_THRESHOLD = 35


def generate_continuity_message(
    current_score: int,
    previous_score: Optional[int],
    delta: Optional[int]
) -> Optional[str]:
    """
    Describe the change since the previous check-in in one sentence.

    Args:
        current_score: Score of the new check-in
        previous_score: Score of the previous check-in, None if first
        delta: current_score - previous_score

    Returns:
        Message, or None when there is nothing to compare against
    """
    if previous_score is None or delta is None:
        return None

    abs_delta = abs(delta)

    if abs_delta <= STABLE_BAND:
        return "Similar to last week."

    if delta < 0:
        if abs_delta <= SLIGHT_BAND:
            return "Slight improvement from last week."
        if abs_delta <= NOTICEABLE_BAND:
            return "Noticeable improvement from last week."
        return "Significant improvement from last week."

    if delta > 0:
        if abs_delta <= SLIGHT_BAND:
            return "Drift increased slightly."
        if abs_delta <= NOTICEABLE_BAND:
            return "Drift increased compared to last week."
        return "Drift increased significantly."

    return "Similar to last week."


def detect_recovery(current_score: int, previous_score: Optional[int]) -> bool:
    """True when the score moved from moderate-or-worse (>= 35) to below 35."""
    if previous_score is None:
        return False
    return previous_score >= RECOVERY_THRESHOLD and current_score < RECOVERY_THRESHOLD


def get_recovery_message() -> str:
    return "You stabilized after a drift period."
