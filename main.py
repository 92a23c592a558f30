"""
HumanCheck API

FastAPI application exposing:
- GET /challenge → question + tracing target
- POST /analyze/timing → TimingFeatures
- POST /analyze/motion → MotionFeatures
- POST /verify → VerificationResult

The service is stateless; the client keeps the challenge session.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from humancheck import __version__
from humancheck.challenges import complexity_tier, random_question, random_shape
from humancheck.config import get_settings
from humancheck.errors import UnknownQuestionError
from humancheck.orchestrator import VerificationOrchestrator
from humancheck.schemas.inputs import MotionPayload, TimingPayload, VerifyPayload
from humancheck.schemas.outputs import (
    ChallengeResponse,
    MotionFeatures,
    TimingFeatures,
    VerificationResult,
)


settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application State
# =============================================================================

class AppState:
    """Application state container."""
    orchestrator: Optional[VerificationOrchestrator] = None


state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting HumanCheck API...")
    state.orchestrator = VerificationOrchestrator()
    logger.info("HumanCheck ready")

    yield

    # Shutdown
    logger.info("Shutting down HumanCheck API...")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="HumanCheck",
    description="Behavioral human verification from timing and drawing kinematics",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/", include_in_schema=False)
async def root():
    """Redirect root to API documentation."""
    from fastapi.responses import RedirectResponse
    return RedirectResponse(url="/docs")


# =============================================================================
# Challenge Issuance
# =============================================================================

@app.get("/challenge", response_model=ChallengeResponse)
async def challenge():
    """Issue a random question and tracing target. The answer stays server-side."""
    question = random_question()
    return ChallengeResponse(
        question_id=question.id,
        prompt=question.prompt,
        question_type=question.type.value,
        complexity_tier=complexity_tier(question.type),
        shape=random_shape(),
    )


# =============================================================================
# Stage Analysis Endpoints
# =============================================================================

@app.post("/analyze/timing", response_model=TimingFeatures)
async def analyze_timing(payload: TimingPayload):
    """Timing features for an answered question."""
    try:
        return state.orchestrator.analyze_question(
            payload.start_time,
            payload.end_time,
            payload.complexity_tier,
        )
    except Exception as e:
        logger.error(f"Timing analysis error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error during timing analysis"
        )


@app.post("/analyze/motion", response_model=MotionFeatures)
async def analyze_motion(payload: MotionPayload):
    """Motion features for a traced shape."""
    try:
        return state.orchestrator.analyze_drawing(payload.samples, payload.shape)
    except Exception as e:
        logger.error(f"Motion analysis error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error during motion analysis"
        )


# =============================================================================
# Verify Endpoint (JSON Response)
# =============================================================================

@app.post("/verify", response_model=VerificationResult)
async def verify(payload: VerifyPayload):
    """
    Score a completed challenge.

    - Looks up the expected answer and complexity by question_id
    - Returns the feature records, correctness flag and verdict
    """
    try:
        return state.orchestrator.verify(payload)
    except UnknownQuestionError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Verify error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error during verification"
        )


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
