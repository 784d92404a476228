"""
Soft streak tracking.

A streak counts consecutive weekly check-ins with a Lag Score under 35
(aligned or mild drift). A gap of more than 7 days restarts it.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from lifelag.engine.types import StreakInfo, StreakState, as_utc

logger = logging.getLogger(__name__)

STREAK_SCORE_THRESHOLD = 35
MAX_DAYS_BETWEEN_CHECKINS = 7
MIN_VISIBLE_STREAK = 2
WEEKS_PER_MONTH = 4
WEEKS_IN_YEAR = 52

SECONDS_PER_DAY = 24 * 60 * 60


def _days_between(earlier: datetime, later: datetime) -> float:
    return (as_utc(later) - as_utc(earlier)).total_seconds() / SECONDS_PER_DAY


def calculate_soft_streak(
    current_score: int,
    last_streak_count: int,
    last_checkin_at: Optional[datetime],
    current_date: Optional[datetime] = None
) -> int:
    """
    Calculate the streak after a new check-in.

    Args:
        current_score: Lag Score of the new check-in
        last_streak_count: Streak stored before this check-in
        last_checkin_at: Time of the previous check-in, None if first
        current_date: Time of the new check-in (defaults to now, UTC)

    Returns:
        New streak count: previous + 1, restarted at 1, or 0
    """
    current_date = current_date or datetime.now(timezone.utc)
    is_good = current_score < STREAK_SCORE_THRESHOLD

    if last_checkin_at is None:
        return 1 if is_good else 0

    days_diff = _days_between(last_checkin_at, current_date)

    if days_diff > MAX_DAYS_BETWEEN_CHECKINS:
        logger.debug(f"Streak chain broken after {days_diff:.1f} days")
        return 1 if is_good else 0

    if is_good:
        return last_streak_count + 1
    return 0


def format_streak_message(streak_count: int) -> Optional[str]:
    """
    Format a streak count for display.

    Returns None below 2 weeks, weeks up to 51 and whole months
    (weeks // 4) from 52 weeks on.
    """
    if streak_count < MIN_VISIBLE_STREAK:
        return None

    if streak_count < WEEKS_IN_YEAR:
        return f"{streak_count}-week maintenance streak"

    months = streak_count // WEEKS_PER_MONTH
    return f"{months}-month maintenance streak"


def _days_until_reset(last_checkin_at: datetime, current_date: datetime) -> int:
    days_since = _days_between(last_checkin_at, current_date)
    return max(0, MAX_DAYS_BETWEEN_CHECKINS - math.floor(days_since))


def describe_stored_streak(
    streak_state: StreakState,
    current_date: Optional[datetime] = None
) -> StreakInfo:
    """
    Describe a stored streak between check-ins.

    The stored count is kept as is; it counts as active while the next
    check-in could still extend it.
    """
    current_date = current_date or datetime.now(timezone.utc)
    count = streak_state.current_streak
    last_checkin_at = streak_state.last_checkin_at

    is_active = (
        count > 0
        and last_checkin_at is not None
        and _days_between(last_checkin_at, current_date) <= MAX_DAYS_BETWEEN_CHECKINS
    )

    return StreakInfo(
        count=count,
        message=format_streak_message(count),
        is_active=is_active,
        was_just_broken=False,
        days_until_reset=_days_until_reset(last_checkin_at, current_date) if is_active else None,
    )


def get_streak_info(
    current_score: int,
    last_streak_count: int,
    last_checkin_at: Optional[datetime],
    current_date: Optional[datetime] = None
) -> StreakInfo:
    """
    Calculate the new streak together with display metadata.

    Returns:
        StreakInfo with the new count, its message, whether the streak is
        active, whether this check-in broke it and days left before a gap
        would reset it
    """
    current_date = current_date or datetime.now(timezone.utc)
    new_count = calculate_soft_streak(
        current_score, last_streak_count, last_checkin_at, current_date
    )
    is_active = new_count > 0

    days_until_reset = None
    if last_checkin_at is not None and is_active:
        days_until_reset = _days_until_reset(last_checkin_at, current_date)

    return StreakInfo(
        count=new_count,
        message=format_streak_message(new_count),
        is_active=is_active,
        was_just_broken=last_streak_count > 0 and new_count == 0,
        days_until_reset=days_until_reset,
    )
