"""Unit tests for soft streak tracking."""

import pytest
from datetime import datetime, timedelta, timezone

from lifelag.engine import (
    StreakState,
    calculate_soft_streak,
    format_streak_message,
    get_streak_info,
    describe_stored_streak,
)


# ─────────────────────────────────────────────────────────────────
# calculate_soft_streak
# ─────────────────────────────────────────────────────────────────


class TestCalculateSoftStreak:
    def test_first_good_checkin_starts_streak(self, now):
        assert calculate_soft_streak(20, 0, None, now) == 1

    def test_first_poor_checkin_has_no_streak(self, now):
        assert calculate_soft_streak(40, 0, None, now) == 0

    def test_good_checkin_within_week_extends(self, now):
        assert calculate_soft_streak(30, 3, now - timedelta(days=2), now) == 4

    def test_poor_checkin_resets(self, now):
        assert calculate_soft_streak(60, 5, now - timedelta(days=2), now) == 0

    def test_threshold_score_is_not_good(self, now):
        assert calculate_soft_streak(35, 5, now - timedelta(days=7), now) == 0

    def test_gap_over_a_week_restarts(self, now):
        assert calculate_soft_streak(20, 5, now - timedelta(days=10), now) == 1

    def test_gap_over_a_week_with_poor_score(self, now):
        assert calculate_soft_streak(50, 5, now - timedelta(days=10), now) == 0

    def test_exactly_seven_days_still_continues(self, now):
        assert calculate_soft_streak(20, 5, now - timedelta(days=7), now) == 6

    def test_just_over_seven_days_restarts(self, now):
        last = now - timedelta(days=7, hours=1)
        assert calculate_soft_streak(20, 5, last, now) == 1

    def test_naive_last_checkin_with_default_date(self):
        last = datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(days=10)
        assert calculate_soft_streak(20, 5, last) == 1

    def test_naive_last_checkin_with_aware_date(self, now):
        last = (now - timedelta(days=2)).replace(tzinfo=None)
        assert calculate_soft_streak(30, 3, last, now) == 4


# ─────────────────────────────────────────────────────────────────
# format_streak_message
# ─────────────────────────────────────────────────────────────────


class TestFormatStreakMessage:
    @pytest.mark.parametrize("count", [0, 1])
    def test_short_streaks_hidden(self, count):
        assert format_streak_message(count) is None

    def test_weeks(self):
        assert format_streak_message(2) == "2-week maintenance streak"
        assert format_streak_message(51) == "51-week maintenance streak"

    def test_months_from_a_year(self):
        assert format_streak_message(52) == "13-month maintenance streak"
        assert format_streak_message(61) == "15-month maintenance streak"


# ─────────────────────────────────────────────────────────────────
# get_streak_info / describe_stored_streak
# ─────────────────────────────────────────────────────────────────


class TestGetStreakInfo:
    def test_extended_streak(self, now):
        info = get_streak_info(20, 3, now - timedelta(days=3), now)

        assert info.count == 4
        assert info.message == "4-week maintenance streak"
        assert info.is_active is True
        assert info.was_just_broken is False
        assert info.days_until_reset == 4

    def test_broken_streak(self, now):
        info = get_streak_info(60, 3, now - timedelta(days=2), now)

        assert info.count == 0
        assert info.message is None
        assert info.is_active is False
        assert info.was_just_broken is True
        assert info.days_until_reset is None

    def test_first_checkin(self, now):
        info = get_streak_info(10, 0, None, now)

        assert info.count == 1
        assert info.is_active is True
        assert info.was_just_broken is False
        assert info.days_until_reset is None


class TestDescribeStoredStreak:
    def test_active_streak(self, now):
        info = describe_stored_streak(StreakState(3, now - timedelta(days=2)), now)

        assert info.count == 3
        assert info.message == "3-week maintenance streak"
        assert info.is_active is True
        assert info.days_until_reset == 5

    def test_lapsed_streak_keeps_count(self, now):
        info = describe_stored_streak(StreakState(3, now - timedelta(days=10)), now)

        assert info.count == 3
        assert info.is_active is False
        assert info.days_until_reset is None

    def test_naive_stored_time_with_naive_date(self, now):
        naive_now = now.replace(tzinfo=None)
        info = describe_stored_streak(StreakState(3, naive_now - timedelta(days=2)), naive_now)

        assert info.is_active is True
        assert info.days_until_reset == 5

    def test_no_streak(self, now):
        info = describe_stored_streak(StreakState(), now)

        assert info.count == 0
        assert info.message is None
        assert info.is_active is False
