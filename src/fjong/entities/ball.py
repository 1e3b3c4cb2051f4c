"""
Ball entity for Fjong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from fjong.constants import BALL_LAYER


@dataclass
class Ball:
    """
    The single ball of a match.

    :ivar position (Position2D): Center of the ball.
    :ivar size (Size2D): Full extents of the bounding box.
    :ivar velocity (Velocity2D): Velocity in units per second.
    :ivar layer (float): Draw order hint for the presentation layer.
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    layer: float = BALL_LAYER

    @property
    def half_width(self) -> float:
        """Half of the ball width."""
        return self.size.width / 2

    def place(self, x: float, y: float):
        """Move the ball center to (x, y)."""
        self.position.x = x
        self.position.y = y
