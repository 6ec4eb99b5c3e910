"""
Domain models — Pydantic types for the bootstrapper.

All models are re-exported here for convenient access:

    from devstrap.core.models import InstallTarget, InstallPhase, Outcome
"""

from devstrap.core.models.outcome import Outcome, PhaseSummary, TargetResult, TargetState
from devstrap.core.models.target import (
    FontSpec,
    InstallMethod,
    InstallPhase,
    InstallTarget,
    MethodFamily,
    Prerequisite,
)

__all__ = [
    # target.py
    "FontSpec",
    "InstallMethod",
    "InstallPhase",
    "InstallTarget",
    "MethodFamily",
    "Prerequisite",
    # outcome.py
    "Outcome",
    "PhaseSummary",
    "TargetResult",
    "TargetState",
]
