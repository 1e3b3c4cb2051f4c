"""
Entities package for Fjong.
This package contains the records that make up a match world.
"""

from __future__ import annotations

from .arena import Goal, Wall
from .ball import Ball
from .paddle import Paddle, Player

__all__ = [
    "Ball",
    "Goal",
    "Paddle",
    "Player",
    "Wall",
]
