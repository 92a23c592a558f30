"""
HumanCheck Timing Processor

Stateless feature engineering for question response timing.
Turns the authoritative start/end timestamp pair of an answered question
into a TimingFeatures record, scaled by the question's complexity tier.
"""

import logging

from humancheck.schemas.outputs import TimingFeatures


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Plausible human response window per complexity tier (ms)
MIN_TIME_PER_TIER_MS = 1000
MAX_TIME_PER_TIER_MS = 8000

# Assumed answer length used for the typing-speed proxy
ASSUMED_ANSWER_CHARS = 3


# =============================================================================
# Timing Analysis
# =============================================================================

def analyze_timing(start_time: int, end_time: int, complexity_tier: int) -> TimingFeatures:
    """
    Derive timing features for one answered question.

    Below the tier's minimum the answer is treated as superhumanly fast;
    above the maximum the user probably got distracted, which is tolerated
    but no longer counts as natural.

    Args:
        start_time: Timestamp when the question was shown (ms)
        end_time: Timestamp when the answer was submitted (ms)
        complexity_tier: Positive weighting factor (1 recall, 2 arithmetic, 3 logic)

    Returns:
        TimingFeatures record
    """
    response_time = end_time - start_time
    if response_time < 0:
        logger.debug(f"Negative elapsed time ({response_time}ms) clamped to 0")
        response_time = 0

    expected_min = complexity_tier * MIN_TIME_PER_TIER_MS
    expected_max = complexity_tier * MAX_TIME_PER_TIER_MS

    return TimingFeatures(
        response_time=response_time,
        thinking_time=max(0, response_time - expected_min),
        typing_speed=response_time / ASSUMED_ANSWER_CHARS,
        is_natural_timing=expected_min <= response_time <= expected_max,
    )
