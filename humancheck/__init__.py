"""
HumanCheck

Behavioral human/bot scoring from question timing and shape-tracing
kinematics.
"""

from humancheck.orchestrator import VerificationOrchestrator

__version__ = "1.0.0"

__all__ = [
    "VerificationOrchestrator",
]
