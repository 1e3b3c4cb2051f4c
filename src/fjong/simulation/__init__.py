"""
Fixed-timestep match simulation.
"""

from __future__ import annotations

from .clock import FixedStepClock
from .models import (
    MatchPhase,
    MatchSnapshot,
    MatchState,
    PongTickContext,
    PongWorld,
    ScoreState,
    ServeLockout,
)
from .pipeline import PongSimulation

__all__ = [
    "FixedStepClock",
    "MatchPhase",
    "MatchSnapshot",
    "MatchState",
    "PongSimulation",
    "PongTickContext",
    "PongWorld",
    "ScoreState",
    "ServeLockout",
]
