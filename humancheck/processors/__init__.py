"""
HumanCheck Processors

Public exports for feature engineering processors.
"""

from humancheck.processors.motion import analyze_motion
from humancheck.processors.shapes import shape_accuracy
from humancheck.processors.timing import analyze_timing

__all__ = [
    "analyze_motion",
    "analyze_timing",
    "shape_accuracy",
]
