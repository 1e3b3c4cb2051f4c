"""
Paddle entity for Fjong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from fjong.constants import BOTTOM_WALL, PADDLE_PADDING, TOP_WALL

Player = Literal["P1", "P2"]


@dataclass
class Paddle:
    """
    Paddle entity. Only the y coordinate ever changes during a match.

    :ivar player (Player): "P1" (left side) or "P2" (right side).
    :ivar position (Position2D): Center of the paddle.
    :ivar size (Size2D): Full extents of the paddle.
    :ivar velocity (Velocity2D): Non-zero only for velocity-driven control.
    """

    player: Player
    position: Position2D
    size: Size2D
    velocity: Velocity2D

    @property
    def side(self) -> float:
        """-1.0 for the left paddle, +1.0 for the right one."""
        return -1.0 if self.player == "P1" else 1.0

    @property
    def half_height(self) -> float:
        """Half of the paddle height."""
        return self.size.height / 2

    @property
    def half_width(self) -> float:
        """Half of the paddle width."""
        return self.size.width / 2

    @property
    def bounds(self) -> tuple[float, float]:
        """Lowest and highest allowed center y."""
        bottom = BOTTOM_WALL + self.size.height - PADDLE_PADDING
        top = TOP_WALL - self.size.height + PADDLE_PADDING
        return bottom, top

    def clamp(self):
        """Keep the paddle center inside its vertical bounds."""
        bottom, top = self.bounds
        self.position.y = max(bottom, min(top, self.position.y))
