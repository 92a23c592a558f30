"""
HumanCheck Models

Deterministic rule-based confidence scoring.
"""

from humancheck.models.scoring import HumanScoreModel, aggregate

__all__ = [
    "HumanScoreModel",
    "aggregate",
]
