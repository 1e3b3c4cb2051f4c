"""
Simulation core for Fjong, a two-paddle ball game.
"""

from __future__ import annotations

from fjong.simulation.models import MatchPhase, MatchSnapshot, MatchState
from fjong.simulation.pipeline import PongSimulation

__all__ = [
    "MatchPhase",
    "MatchSnapshot",
    "MatchState",
    "PongSimulation",
]
