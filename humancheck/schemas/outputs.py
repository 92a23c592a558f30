"""
HumanCheck Output Schemas

This module defines Pydantic V2 models for the derived feature records
and the final verdict. All records are frozen: every pipeline stage
returns a new record instead of mutating its input.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from humancheck.schemas.inputs import ShapeKind


# =============================================================================
# Feature Records
# =============================================================================

class TimingFeatures(BaseModel):
    """Timing features derived from a question start/end pair."""
    model_config = ConfigDict(frozen=True)

    response_time: int = Field(..., ge=0, description="Elapsed answer time (ms)")
    thinking_time: int = Field(
        ...,
        ge=0,
        description="Time spent beyond the minimum expected for the tier (ms)"
    )
    typing_speed: float = Field(..., ge=0.0, description="Coarse ms-per-character proxy")
    is_natural_timing: bool = Field(
        ...,
        description="Response fell inside the tier's plausible human window"
    )


class MotionFeatures(BaseModel):
    """Kinematic features derived from a pointer trace."""
    model_config = ConfigDict(frozen=True)

    smoothness: float = Field(..., ge=0.0, le=100.0, description="Inverse directional jitter")
    natural_movement: bool = Field(..., description="Smooth enough with varied speed")
    drawing_accuracy: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Shape-specific goodness of fit"
    )
    speed_variation: float = Field(
        ...,
        ge=0.0,
        description="Mean absolute deviation of segment speed (px/ms)"
    )


# =============================================================================
# Verdict
# =============================================================================

class ScoreResult(BaseModel):
    """Final confidence score and human/bot verdict."""
    model_config = ConfigDict(frozen=True)

    is_human: bool = Field(..., description="confidence >= human threshold")
    confidence: int = Field(..., ge=0, le=100, description="Likelihood of human origin")
    reasons: List[str] = Field(
        default_factory=list,
        description="Rules that fired, in evaluation order"
    )


class VerificationResult(BaseModel):
    """
    Bundle handed to the results view.

    The intermediate feature records and correctness flag are kept
    alongside the verdict for display.
    """
    model_config = ConfigDict(frozen=True)

    timing: TimingFeatures
    motion: MotionFeatures
    answered_correctly: bool
    result: ScoreResult


# =============================================================================
# Challenge Issuance
# =============================================================================

class ChallengeResponse(BaseModel):
    """Question and tracing target issued to the client. The answer is withheld."""
    question_id: str = Field(..., description="Question bank identifier")
    prompt: str = Field(..., description="Question text")
    question_type: str = Field(..., description="math, logic or visual")
    complexity_tier: int = Field(..., ge=1, description="Timing weighting factor")
    shape: ShapeKind = Field(..., description="Shape to trace")
