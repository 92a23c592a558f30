"""
HumanCheck Score Model - Additive Human Confidence

Deterministic rule-based aggregation of timing and motion features.
Zero ML, zero learning, zero state.

Architecture:
    TimingFeatures + MotionFeatures + correctness -> HumanScoreModel -> ScoreResult

Rules (evaluated in order, reasons kept in the same order):
    1. Timing      natural window +40 / too fast / too slow
    2. Movement    natural movement +30
    3. Smoothness  > 50 -> +15
    4. Speed       variation > 0.5 -> +10
    5. Accuracy    > 60 -> +5
    6. Answer      correct +10 / incorrect -20 (floored at 0)
    7. Clamp       [0, 100]
    8. Decision    confidence >= 70 -> human
"""

import logging
from typing import List

from humancheck.schemas.outputs import MotionFeatures, ScoreResult, TimingFeatures


logger = logging.getLogger(__name__)


class HumanScoreModel:
    """
    Additive confidence model.

    Every threshold and weight is a class attribute so a subclass (or a
    test) can retune one without touching the rule flow.
    """

    # ==========================================================================
    # TIMING
    # ==========================================================================
    TOO_FAST_MS: int = 500
    TOO_SLOW_MS: int = 30000
    WEIGHT_TIMING: int = 40

    # ==========================================================================
    # MOVEMENT
    # ==========================================================================
    WEIGHT_NATURAL_MOVEMENT: int = 30

    SMOOTHNESS_MIN: float = 50.0
    WEIGHT_SMOOTHNESS: int = 15

    SPEED_VARIATION_MIN: float = 0.5
    WEIGHT_SPEED_VARIATION: int = 10

    ACCURACY_MIN: float = 60.0
    WEIGHT_ACCURACY: int = 5

    # ==========================================================================
    # ANSWER
    # ==========================================================================
    BONUS_CORRECT: int = 10
    PENALTY_INCORRECT: int = 20

    # ==========================================================================
    # DECISION
    # ==========================================================================
    MAX_CONFIDENCE: int = 100
    HUMAN_THRESHOLD: int = 70

    def score(
        self,
        timing: TimingFeatures,
        motion: MotionFeatures,
        answered_correctly: bool,
    ) -> ScoreResult:
        """
        Combine feature records into a verdict.

        Args:
            timing: Output of analyze_timing
            motion: Output of analyze_motion
            answered_correctly: Normalized answer matched the expected one

        Returns:
            ScoreResult with clamped confidence and ordered reasons
        """
        confidence = 0
        reasons: List[str] = []

        # Timing
        if timing.is_natural_timing:
            confidence += self.WEIGHT_TIMING
            reasons.append("Natural response timing")
        elif timing.response_time < self.TOO_FAST_MS:
            reasons.append("Response too fast for human")
        elif timing.response_time > self.TOO_SLOW_MS:
            reasons.append("Response too slow")

        # Movement
        if motion.natural_movement:
            confidence += self.WEIGHT_NATURAL_MOVEMENT
            reasons.append("Natural mouse movement detected")

        if motion.smoothness > self.SMOOTHNESS_MIN:
            confidence += self.WEIGHT_SMOOTHNESS
            reasons.append("Smooth drawing pattern")

        if motion.speed_variation > self.SPEED_VARIATION_MIN:
            confidence += self.WEIGHT_SPEED_VARIATION
            reasons.append("Human-like speed variation")

        if motion.drawing_accuracy > self.ACCURACY_MIN:
            confidence += self.WEIGHT_ACCURACY
            reasons.append("Good shape accuracy")

        # Answer
        if answered_correctly:
            confidence += self.BONUS_CORRECT
            reasons.append("Answered question correctly")
        else:
            confidence = max(0, confidence - self.PENALTY_INCORRECT)
            reasons.append("Incorrect answer provided")

        # Decision
        confidence = max(0, min(self.MAX_CONFIDENCE, confidence))
        is_human = confidence >= self.HUMAN_THRESHOLD

        logger.debug(f"Score: confidence={confidence} human={is_human} reasons={reasons}")
        return ScoreResult(is_human=is_human, confidence=confidence, reasons=reasons)


_default_model = HumanScoreModel()


def aggregate(
    timing: TimingFeatures,
    motion: MotionFeatures,
    answered_correctly: bool,
) -> ScoreResult:
    """Score with the default thresholds."""
    return _default_model.score(timing, motion, answered_correctly)
