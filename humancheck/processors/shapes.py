"""
Shape-Accuracy Estimators

One estimator per ShapeKind, all sharing the signature
`estimate(points, centroid) -> float` with a result in [0, 100].
These are coarse heuristics, not geometric fitting.

`points` is an (N, 2) float array of x/y positions and `centroid`
a length-2 array, as produced by the motion processor.
"""

import logging
import math
from typing import Callable, Dict, Sequence

import numpy as np
from numpy.typing import NDArray

from humancheck.schemas.inputs import PointerSample, ShapeKind


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Minimum samples required before a trace is scored at all
MIN_SAMPLES = 10

# Circle: every unit of radial variance costs this fraction of a point
CIRCLE_VARIANCE_DIVISOR = 10.0

# Triangle: fixed scores for "enough anchor angles" / "not enough"
TRIANGLE_ANCHORS_REQUIRED = 3
TRIANGLE_MATCH_SCORE = 70.0
TRIANGLE_MISS_SCORE = 30.0


Estimator = Callable[[NDArray[np.float64], NDArray[np.float64]], float]


# =============================================================================
# Estimators
# =============================================================================

def estimate_circle(points: NDArray[np.float64], centroid: NDArray[np.float64]) -> float:
    """Consistent radius around the centroid scores high."""
    if len(points) == 0:
        return 0.0
    distances = np.hypot(points[:, 0] - centroid[0], points[:, 1] - centroid[1])
    variance = float(np.var(distances))
    if not math.isfinite(variance):
        return 0.0
    return max(0.0, 100.0 - variance / CIRCLE_VARIANCE_DIVISOR)


def estimate_square(points: NDArray[np.float64], centroid: NDArray[np.float64]) -> float:
    """Aspect ratio of the bounding box; a square box scores 100."""
    if len(points) == 0:
        return 0.0
    width = float(points[:, 0].max() - points[:, 0].min())
    height = float(points[:, 1].max() - points[:, 1].min())

    # Degenerate trace: a line or a single point
    if width <= 0.0 or height <= 0.0:
        return 0.0

    accuracy = 100.0 * (min(width, height) / max(width, height))
    if not math.isfinite(accuracy):
        return 0.0
    return accuracy


def estimate_triangle(points: NDArray[np.float64], centroid: NDArray[np.float64]) -> float:
    """
    Sample every floor(n/3)-th point as an anchor and record the angle of
    the point following it relative to the centroid. Scores 70 when at
    least three angles were collected, otherwise 30.
    """
    count = len(points)
    step = max(1, count // 3)

    angles = []
    for i in range(0, count, step):
        if i + 1 < count:
            nxt = points[i + 1]
            angles.append(math.atan2(nxt[1] - centroid[1], nxt[0] - centroid[0]))

    if len(angles) >= TRIANGLE_ANCHORS_REQUIRED:
        return TRIANGLE_MATCH_SCORE
    return TRIANGLE_MISS_SCORE


ESTIMATORS: Dict[ShapeKind, Estimator] = {
    ShapeKind.CIRCLE: estimate_circle,
    ShapeKind.SQUARE: estimate_square,
    ShapeKind.TRIANGLE: estimate_triangle,
}


# =============================================================================
# Dispatch
# =============================================================================

def to_points(samples: Sequence[PointerSample]) -> NDArray[np.float64]:
    """Stack sample positions into an (N, 2) array."""
    if not samples:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(s.x, s.y) for s in samples], dtype=np.float64)


def shape_accuracy(samples: Sequence[PointerSample], shape: ShapeKind) -> float:
    """
    Score how well a trace matches the target shape.

    Args:
        samples: Pointer trace
        shape: Target shape kind

    Returns:
        Accuracy in [0, 100]; 0 for a trace shorter than MIN_SAMPLES
        or an unknown shape
    """
    try:
        estimator = ESTIMATORS[ShapeKind(shape)]
    except (ValueError, KeyError):
        logger.warning(f"No accuracy estimator for shape {shape!r}")
        return 0.0

    if len(samples) < MIN_SAMPLES:
        return 0.0

    points = to_points(samples)
    with np.errstate(over="ignore", invalid="ignore"):
        centroid = points.mean(axis=0)
        return estimator(points, centroid)
