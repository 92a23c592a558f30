"""
HumanCheck Schemas

Public exports for input and output Pydantic models.
"""

# Input schemas - Raw samples and payloads
from humancheck.schemas.inputs import (
    MotionPayload,
    PointerSample,
    ShapeKind,
    TimingPayload,
    VerifyPayload,
)

# Output schemas
from humancheck.schemas.outputs import (
    ChallengeResponse,
    MotionFeatures,
    ScoreResult,
    TimingFeatures,
    VerificationResult,
)

__all__ = [
    # Input
    "ShapeKind",
    "PointerSample",
    "TimingPayload",
    "MotionPayload",
    "VerifyPayload",
    # Output
    "TimingFeatures",
    "MotionFeatures",
    "ScoreResult",
    "VerificationResult",
    "ChallengeResponse",
]
