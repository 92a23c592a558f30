"""
HumanCheck Test Suite - Shared Pytest Fixtures

This conftest.py provides fixtures for all test categories including:
- Synthetic pointer traces (human-like circle, robotic line, short trace)
- Score model and orchestrator instances
- Environment isolation for configuration tests

Usage:
    pytest tests/ -v
"""

import math
from typing import List, Sequence

import pytest

from humancheck.schemas.inputs import PointerSample


# =============================================================================
# Trace Builders
# =============================================================================

def make_sample(x: float, y: float, timestamp: int) -> PointerSample:
    """Build a single pointer sample."""
    return PointerSample(x=x, y=y, timestamp=timestamp)


def build_trace(coords: Sequence[tuple], deltas: Sequence[int]) -> List[PointerSample]:
    """
    Attach timestamps to a list of (x, y) points.

    deltas cycle: the k-th segment takes deltas[k % len(deltas)] ms.
    """
    samples = []
    ts = 0
    for i, (x, y) in enumerate(coords):
        if i > 0:
            ts += deltas[(i - 1) % len(deltas)]
        samples.append(make_sample(x, y, ts))
    return samples


def circle_coords(n: int = 40, radius: float = 100.0, center: tuple = (200.0, 200.0)) -> List[tuple]:
    """n evenly spaced points on one revolution (no repeated endpoint)."""
    cx, cy = center
    return [
        (cx + radius * math.cos(2 * math.pi * k / n), cy + radius * math.sin(2 * math.pi * k / n))
        for k in range(n)
    ]


def square_coords(side: float = 100.0, per_edge: int = 10) -> List[tuple]:
    """Perimeter of an axis-aligned square starting at the origin."""
    step = side / per_edge
    coords = []
    coords += [(i * step, 0.0) for i in range(per_edge)]
    coords += [(side, i * step) for i in range(per_edge)]
    coords += [(side - i * step, side) for i in range(per_edge)]
    coords += [(0.0, side - i * step) for i in range(per_edge)]
    return coords


def line_coords(n: int = 10, step: float = 10.0) -> List[tuple]:
    """Horizontal line moving right."""
    return [(i * step, 0.0) for i in range(n)]


# =============================================================================
# Trace Fixtures
# =============================================================================

@pytest.fixture
def human_circle_trace() -> List[PointerSample]:
    """Circle traced with alternating fast/slow segments (5ms / 20ms)."""
    return build_trace(circle_coords(), deltas=[5, 20])


@pytest.fixture
def robotic_line_trace() -> List[PointerSample]:
    """Ten samples on a straight line at perfectly constant speed."""
    return build_trace(line_coords(), deltas=[10])


@pytest.fixture
def short_trace() -> List[PointerSample]:
    """Nine samples, one below the analysis minimum."""
    return build_trace(circle_coords(n=9), deltas=[10])


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def score_model():
    """Create a HumanScoreModel instance."""
    from humancheck.models.scoring import HumanScoreModel
    return HumanScoreModel()


@pytest.fixture
def orchestrator():
    """Create a VerificationOrchestrator instance."""
    from humancheck.orchestrator import VerificationOrchestrator
    return VerificationOrchestrator()


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def clean_settings(monkeypatch):
    """
    Strip HUMANCHECK_* variables and clear the settings cache
    before and after the test.
    """
    import os
    from humancheck.config import get_settings

    for name in list(os.environ):
        if name.startswith("HUMANCHECK_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
