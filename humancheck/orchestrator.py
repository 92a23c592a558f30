"""
HumanCheck Orchestrator

Stateless composition of the scoring pipeline.

Pipeline:
    Question timing ─┐
                     ├─> HumanScoreModel -> VerificationResult
    Pointer trace ───┘

Timing and motion analysis are independent; both feed the score model
together with the answer-correctness flag. Nothing is kept between
calls: the client owns all session state and submits once per
completed challenge.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from humancheck.challenges import complexity_tier, get_question, is_correct_answer
from humancheck.models import HumanScoreModel
from humancheck.processors import analyze_motion, analyze_timing
from humancheck.schemas.inputs import PointerSample, ShapeKind, VerifyPayload
from humancheck.schemas.outputs import (
    MotionFeatures,
    TimingFeatures,
    VerificationResult,
)


logger = logging.getLogger(__name__)


class VerificationOrchestrator:
    """
    Runs timing analysis, motion analysis and scoring for one challenge.

    The score model is injectable so alternative thresholds can be tried
    without touching the pipeline.
    """

    def __init__(self, score_model: Optional[HumanScoreModel] = None) -> None:
        """Initialize orchestrator."""
        self.score_model = score_model or HumanScoreModel()
        logger.info("VerificationOrchestrator initialized")

    # -------------------------------------------------------------------------
    # Stage Analysis
    # -------------------------------------------------------------------------

    def analyze_question(
        self,
        start_time: int,
        end_time: int,
        complexity_tier: int,
    ) -> TimingFeatures:
        """Timing features for an answered question."""
        return analyze_timing(start_time, end_time, complexity_tier)

    def analyze_drawing(
        self,
        samples: Sequence[PointerSample],
        shape: ShapeKind,
    ) -> MotionFeatures:
        """Motion features for a traced shape."""
        return analyze_motion(samples, shape)

    # -------------------------------------------------------------------------
    # Evaluate
    # -------------------------------------------------------------------------

    def evaluate(
        self,
        timing: TimingFeatures,
        motion: MotionFeatures,
        answered_correctly: bool,
    ) -> VerificationResult:
        """Score precomputed feature records and bundle them with the verdict."""
        result = self.score_model.score(timing, motion, answered_correctly)

        logger.info(
            f"Verdict: {'HUMAN' if result.is_human else 'BOT'} "
            f"(confidence={result.confidence}, reasons={len(result.reasons)})"
        )

        return VerificationResult(
            timing=timing,
            motion=motion,
            answered_correctly=answered_correctly,
            result=result,
        )

    def verify(self, payload: VerifyPayload) -> VerificationResult:
        """
        Full challenge verification.

        Resolves the question from the bank for its expected answer and
        complexity tier, then runs both analyzers and the score model.

        Raises:
            UnknownQuestionError: question_id is not in the bank
        """
        question = get_question(payload.question_id)

        timing = self.analyze_question(
            payload.start_time,
            payload.end_time,
            complexity_tier(question.type),
        )
        motion = self.analyze_drawing(payload.samples, payload.shape)
        answered_correctly = is_correct_answer(payload.submitted_answer, question.answer)

        logger.debug(
            f"Question {question.id} ({question.type.value}): "
            f"timing={timing} motion={motion} correct={answered_correctly}"
        )

        return self.evaluate(timing, motion, answered_correctly)
