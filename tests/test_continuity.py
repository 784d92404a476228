"""Unit tests for continuity and recovery messaging."""

import pytest

from lifelag.engine import generate_continuity_message, detect_recovery, get_recovery_message


class TestGenerateContinuityMessage:
    def test_no_previous_checkin(self):
        assert generate_continuity_message(40, None, None) is None

    @pytest.mark.parametrize("previous,current,expected", [
        (40, 40, "Similar to last week."),
        (40, 37, "Similar to last week."),
        (40, 43, "Similar to last week."),
        (40, 35, "Slight improvement from last week."),
        (40, 32, "Slight improvement from last week."),
        (40, 30, "Noticeable improvement from last week."),
        (40, 25, "Noticeable improvement from last week."),
        (40, 24, "Significant improvement from last week."),
        (40, 45, "Drift increased slightly."),
        (40, 50, "Drift increased compared to last week."),
        (40, 55, "Drift increased compared to last week."),
        (40, 56, "Drift increased significantly."),
    ])
    def test_delta_bands(self, previous, current, expected):
        assert generate_continuity_message(current, previous, current - previous) == expected


class TestDetectRecovery:
    @pytest.mark.parametrize("current,previous,expected", [
        (30, 40, True),
        (34, 35, True),
        (35, 40, False),
        (20, 30, False),
        (30, None, False),
    ])
    def test_recovery(self, current, previous, expected):
        assert detect_recovery(current, previous) is expected

    def test_recovery_message(self):
        assert get_recovery_message() == "You stabilized after a drift period."


class TestContinuityExamples:
    def test_small_change_is_stable(self):
        assert generate_continuity_message(50, 48, 2) == "Similar to last week."

    def test_large_drop_is_significant_improvement(self):
        assert generate_continuity_message(30, 50, -20) == "Significant improvement from last week."
