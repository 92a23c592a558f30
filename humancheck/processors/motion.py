"""
Motion Processor - Pointer Trace Kinematics

Stateless transformation of a traced shape into a MotionFeatures record.

Architecture:
    Pointer Samples -> analyze_motion -> MotionFeatures -> HumanScoreModel

Features extracted:
- smoothness: cumulative turning between consecutive segments, per sample
- speed_variation: mean absolute deviation of segment speed
- drawing_accuracy: shape-specific fit, see processors.shapes
- natural_movement: smooth enough AND speed varies like a hand
"""

import logging
import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from humancheck.processors.shapes import MIN_SAMPLES, shape_accuracy, to_points
from humancheck.schemas.inputs import PointerSample, ShapeKind
from humancheck.schemas.outputs import MotionFeatures


logger = logging.getLogger(__name__)


# =============================================================================
# TRACE VALIDATION THRESHOLDS
# =============================================================================

# Smoothness = max(FLOOR, 100 - (total_turn / samples) * SCALE)
ANGLE_CHANGE_SCALE = 10.0
SMOOTHNESS_FLOOR = 0.0

# Natural movement cutoffs
NATURAL_SMOOTHNESS_MIN = 30.0
NATURAL_SPEED_VARIATION_MIN = 0.5


ZERO_SIGNAL = MotionFeatures(
    smoothness=0.0,
    natural_movement=False,
    drawing_accuracy=0.0,
    speed_variation=0.0,
)


# =============================================================================
# Motion Analysis
# =============================================================================

def analyze_motion(samples: Sequence[PointerSample], target_shape: ShapeKind) -> MotionFeatures:
    """
    Extract kinematic features from a traced shape.

    Args:
        samples: Chronologically ordered pointer samples
        target_shape: Shape that was presented for tracing

    Returns:
        MotionFeatures; the zero-signal record when fewer than
        MIN_SAMPLES samples were captured
    """
    if len(samples) < MIN_SAMPLES:
        logger.debug(f"Trace rejected: only {len(samples)} samples (need {MIN_SAMPLES})")
        return ZERO_SIGNAL

    points = to_points(samples)
    timestamps = np.array([s.timestamp for s in samples], dtype=np.float64)

    with np.errstate(over="ignore", invalid="ignore"):
        smoothness = _smoothness(points)
        speed_variation = _speed_variation(points, timestamps)
    drawing_accuracy = shape_accuracy(samples, target_shape)

    features = MotionFeatures(
        smoothness=smoothness,
        natural_movement=(
            smoothness > NATURAL_SMOOTHNESS_MIN
            and speed_variation > NATURAL_SPEED_VARIATION_MIN
        ),
        drawing_accuracy=drawing_accuracy,
        speed_variation=speed_variation,
    )
    logger.debug(f"Motion features ({len(samples)} samples, {target_shape}): {features}")
    return features


# =============================================================================
# Feature Helpers
# =============================================================================

def _smoothness(points: NDArray[np.float64]) -> float:
    """
    Sum the absolute change in heading over every consecutive pair of
    segments and scale it per sample. Headings are compared as raw
    atan2 values, so a turn across the -pi/pi seam counts as a large one.
    """
    deltas = np.diff(points, axis=0)
    headings = np.arctan2(deltas[:, 1], deltas[:, 0])
    total_angle_change = float(np.abs(np.diff(headings)).sum())
    if not math.isfinite(total_angle_change):
        logger.debug("Non-finite heading change in trace; smoothness floored")
        return SMOOTHNESS_FLOOR

    return max(SMOOTHNESS_FLOOR, 100.0 - (total_angle_change / len(points)) * ANGLE_CHANGE_SCALE)


def _segment_speeds(points: NDArray[np.float64], timestamps: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Speed (px/ms) of every segment that ends a triple, i.e. all but the
    first. Segments with a non-positive time delta are skipped.
    """
    deltas = np.diff(points, axis=0)[1:]
    distances = np.hypot(deltas[:, 0], deltas[:, 1])
    time_diffs = np.diff(timestamps)[1:]

    moving = time_diffs > 0
    return distances[moving] / time_diffs[moving]


def _speed_variation(points: NDArray[np.float64], timestamps: NDArray[np.float64]) -> float:
    """Mean absolute deviation of segment speed; 0 for an empty series."""
    speeds = _segment_speeds(points, timestamps)
    if speeds.size == 0:
        logger.debug("No positive time deltas in trace; speed variation set to 0")
        return 0.0
    variation = float(np.abs(speeds - speeds.mean()).mean())
    if not math.isfinite(variation):
        logger.debug("Non-finite speed statistics in trace; speed variation set to 0")
        return 0.0
    return variation
