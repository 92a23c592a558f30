"""
HumanCheck Input Schemas

This module defines Pydantic V2 models for:
- Raw pointer samples captured while the user traces a shape
- Per-stage analysis payloads (timing, motion)
- The combined verification request submitted at the end of a challenge
"""

from enum import Enum
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class ShapeKind(str, Enum):
    """Target shape presented to the user for tracing."""
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


def _normalize_shape(value: Any) -> Any:
    """Trim and lower-case shape names before enum validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Shape field shared by every payload that names a tracing target
ShapeField = Annotated[ShapeKind, BeforeValidator(_normalize_shape)]


# =============================================================================
# Pointer Samples
# =============================================================================

class PointerSample(BaseModel):
    """
    Single timestamped pointer position captured by the drawing canvas.
    NaN and infinite coordinates are rejected.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float = Field(..., description="X coordinate on the canvas")
    y: float = Field(..., description="Y coordinate on the canvas")
    timestamp: int = Field(..., description="Monotonic timestamp in milliseconds")


# =============================================================================
# Analysis Payloads
# =============================================================================

class TimingPayload(BaseModel):
    """
    Question timing submitted when the user answers.
    Only the final start/end pair is authoritative.
    """
    start_time: int = Field(..., description="Question shown (ms)")
    end_time: int = Field(..., description="Answer submitted (ms)")
    complexity_tier: int = Field(
        ...,
        ge=1,
        description="Question weighting factor (1 recall, 2 arithmetic, 3 logic)"
    )


class MotionPayload(BaseModel):
    """Pointer trace submitted when the user finishes drawing."""
    samples: List[PointerSample] = Field(
        ...,
        description="Chronologically ordered pointer samples"
    )
    shape: ShapeField = Field(..., description="Shape that was presented for tracing")


# =============================================================================
# Verification Request (Root Model)
# =============================================================================

class VerifyPayload(BaseModel):
    """
    Complete challenge submission.

    Carries the question answer with its timing and the drawing trace.
    The expected answer and complexity are looked up from the question
    bank by `question_id`, never trusted from the client.
    """
    question_id: str = Field(..., min_length=1, description="Question bank identifier")
    submitted_answer: str = Field(..., description="Answer typed by the user")
    start_time: int = Field(..., description="Question shown (ms)")
    end_time: int = Field(..., description="Answer submitted (ms)")
    samples: List[PointerSample] = Field(
        default_factory=list,
        description="Chronologically ordered pointer samples"
    )
    shape: ShapeField = Field(..., description="Shape that was presented for tracing")
