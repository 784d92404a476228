"""
Quick Pulse: mid-week follow-up prompt and micro-adjustments.

Decides whether to prompt the user between weekly check-ins and maps their
response (good / adjusting / struggling) to a suggestion for their weakest
dimension.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from lifelag.engine.types import CheckinSummary, MicroAdjustment, as_utc, category_severity

logger = logging.getLogger(__name__)

HIGH_SCORE_TRIGGER = 45
MID_WEEK_MIN_DAYS = 2
MID_WEEK_MAX_DAYS = 5
DISMISSAL_DAYS = 7

SECONDS_PER_DAY = 24 * 60 * 60

GOOD_ADJUSTMENT = MicroAdjustment(message="Great! Keep the momentum going.")

FALLBACK_ADJUSTMENT = MicroAdjustment(message="Take it one step at a time.")

ADJUSTING_SUGGESTIONS = {
    "energy": MicroAdjustment(
        message="Protect tomorrow morning. No early commitments.",
        action_label="View settings",
        action_link="/settings",
    ),
    "sleep": MicroAdjustment(
        message="Set a sleep boundary tonight and honor it.",
        action_label="View settings",
        action_link="/settings",
    ),
    "structure": MicroAdjustment(
        message="Pick one anchor point for tomorrow (breakfast, walk, etc).",
    ),
    "initiation": MicroAdjustment(
        message="Lower the bar on one task today. Just start, don't finish.",
    ),
    "engagement": MicroAdjustment(
        message="Shrink one task to 10 minutes only.",
    ),
    "sustainability": MicroAdjustment(
        message="Drop one thing this week. Not reschedule, actually drop.",
    ),
}

STRUGGLING_SUGGESTIONS = {
    "energy": MicroAdjustment(message="Cancel one thing today. Seriously."),
    "sleep": MicroAdjustment(message="Reset tonight: No screens after 9pm, nothing urgent matters."),
    "structure": MicroAdjustment(message="Tomorrow: Same wake time, same first action. Nothing else."),
    "initiation": MicroAdjustment(message="Lower one expectation right now. Make it stupidly easy."),
    "engagement": MicroAdjustment(message="Cut this week's to-do list in half. Pick what stays."),
    "sustainability": MicroAdjustment(message="This pace isn't sustainable. What are you protecting?"),
}


def should_show_quick_pulse(recent_checkins: Optional[Sequence[CheckinSummary]]) -> bool:
    """
    Decide whether a Quick Pulse prompt is warranted.

    Args:
        recent_checkins: Check-ins newest first

    Returns:
        True when the newest score is >= 45, or when either the score or
        the drift category worsened on both of the last two steps
    """
    if not recent_checkins:
        return False

    current = recent_checkins[0]
    if current.lag_score >= HIGH_SCORE_TRIGGER:
        return True

    if len(recent_checkins) < 3:
        return False

    previous = recent_checkins[1]
    two_before = recent_checkins[2]

    scores_worsening = current.lag_score > previous.lag_score > two_before.lag_score

    current_severity = category_severity(current.drift_category)
    previous_severity = category_severity(previous.drift_category)
    two_before_severity = category_severity(two_before.drift_category)
    categories_worsening = current_severity > previous_severity > two_before_severity

    return scores_worsening or categories_worsening


def _parse_datetime(value: Union[datetime, str, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        logger.warning(f"Unsupported date type passed to quick pulse: {type(value).__name__}")
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Invalid date passed to quick pulse: {value!r}")
        return None


def _whole_days_since(moment: datetime, now: Optional[datetime]) -> Optional[int]:
    now = as_utc(now) or datetime.now(timezone.utc)
    elapsed = (now - as_utc(moment)).total_seconds()
    if elapsed < 0:
        return None
    return int(elapsed // SECONDS_PER_DAY)


def is_middle_of_week(
    last_checkin_date: Union[datetime, str, None],
    now: Optional[datetime] = None
) -> bool:
    """
    True when 2 to 5 whole days have passed since the last check-in.

    Accepts a datetime or an ISO 8601 string. Missing, unparseable or
    future dates return False.
    """
    checkin_date = _parse_datetime(last_checkin_date)
    if checkin_date is None:
        return False

    days = _whole_days_since(checkin_date, now)
    if days is None:
        return False

    return MID_WEEK_MIN_DAYS <= days <= MID_WEEK_MAX_DAYS


def was_dismissed_this_week(
    dismissed_at: Union[datetime, str, None],
    now: Optional[datetime] = None
) -> bool:
    """True when the prompt was dismissed less than 7 whole days ago."""
    dismissed = _parse_datetime(dismissed_at)
    if dismissed is None:
        return False

    days = _whole_days_since(dismissed, now)
    if days is None:
        # Dismissed "in the future" means clocks disagree; treat as just now
        return True

    return days < DISMISSAL_DAYS


def get_micro_adjustment(
    response: str,
    weakest_dimension: str,
    current_score: int
) -> MicroAdjustment:
    """
    Map a Quick Pulse response to a suggestion.

    Args:
        response: "good", "adjusting" or "struggling"
        weakest_dimension: Weakest dimension of the latest check-in
        current_score: Latest Lag Score (reserved for score tiering)

    Returns:
        MicroAdjustment; only adjusting energy/sleep carry an action link
    """
    if response == "good":
        return GOOD_ADJUSTMENT

    if response == "adjusting":
        return ADJUSTING_SUGGESTIONS.get(weakest_dimension, FALLBACK_ADJUSTMENT)

    if response == "struggling":
        return STRUGGLING_SUGGESTIONS.get(weakest_dimension, FALLBACK_ADJUSTMENT)

    return FALLBACK_ADJUSTMENT
