"""
Timing Processor Unit Tests

Tests for analyze_timing: the complexity-scaled response window,
thinking time, the typing-speed proxy and negative-duration clamping.
"""

import pytest

from humancheck.processors.timing import (
    ASSUMED_ANSWER_CHARS,
    MAX_TIME_PER_TIER_MS,
    MIN_TIME_PER_TIER_MS,
    analyze_timing,
)


# =============================================================================
# Response Window Tests
# =============================================================================

class TestResponseWindow:
    """Test the natural-timing window for each complexity tier."""

    def test_too_fast_for_tier(self):
        """1.5s on a tier-2 question is below the 2s minimum."""
        features = analyze_timing(0, 1500, 2)

        assert features.response_time == 1500
        assert features.is_natural_timing is False
        assert features.thinking_time == 0

    def test_natural_response(self):
        """4s on a tier-2 question sits inside the 2s-16s window."""
        features = analyze_timing(0, 4000, 2)

        assert features.response_time == 4000
        assert features.is_natural_timing is True
        assert features.thinking_time == 2000
        assert features.typing_speed == pytest.approx(1333.333, rel=1e-4)

    def test_window_bounds_are_inclusive(self):
        """Exactly the minimum and exactly the maximum are both natural."""
        assert analyze_timing(0, MIN_TIME_PER_TIER_MS, 1).is_natural_timing is True
        assert analyze_timing(0, MAX_TIME_PER_TIER_MS, 1).is_natural_timing is True

    def test_above_window_is_not_natural(self):
        """One millisecond past the maximum is no longer natural."""
        features = analyze_timing(0, 3 * MAX_TIME_PER_TIER_MS + 1, 3)

        assert features.is_natural_timing is False
        assert features.thinking_time == features.response_time - 3 * MIN_TIME_PER_TIER_MS

    def test_absolute_timestamps(self):
        """Only the difference between timestamps matters."""
        base = 1_700_000_000_000
        assert analyze_timing(base, base + 4000, 2) == analyze_timing(0, 4000, 2)


# =============================================================================
# Derived Field Tests
# =============================================================================

class TestDerivedFields:
    """Test thinking time and typing speed."""

    def test_typing_speed_is_fixed_ratio(self):
        """Typing speed divides by the assumed answer length, nothing else."""
        features = analyze_timing(0, 900, 1)
        assert features.typing_speed == pytest.approx(900 / ASSUMED_ANSWER_CHARS)

    def test_thinking_time_never_exceeds_response(self):
        """thinking_time <= response_time for a range of inputs."""
        for tier in (1, 2, 3):
            for elapsed in (0, 500, 1000, 2500, 9000, 40000):
                features = analyze_timing(0, elapsed, tier)
                assert 0 <= features.thinking_time <= features.response_time


# =============================================================================
# Degenerate Input Tests
# =============================================================================

class TestDegenerateInput:
    """Test clamping of caller contract violations."""

    def test_negative_duration_clamped(self):
        """end_time before start_time yields a zero duration, not a negative one."""
        features = analyze_timing(5000, 4000, 2)

        assert features.response_time == 0
        assert features.thinking_time == 0
        assert features.typing_speed == 0.0
        assert features.is_natural_timing is False

    def test_deterministic(self):
        """Identical inputs give identical records."""
        assert analyze_timing(10, 7010, 3) == analyze_timing(10, 7010, 3)
