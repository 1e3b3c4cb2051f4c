"""
Static arena colliders: top/bottom walls and the two goals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from fjong.constants import (
    BOTTOM_WALL,
    LEFT_WALL,
    RIGHT_WALL,
    TOP_WALL,
    WALL_THICKNESS,
)
from fjong.entities.paddle import Player

WallLocation = Literal["BOTTOM", "TOP"]


@dataclass(frozen=True)
class Wall:
    """
    Horizontal wall spanning the arena width. Only reflects the ball.

    :ivar location (WallLocation): "BOTTOM" or "TOP".
    :ivar position (Position2D): Center of the wall.
    :ivar size (Size2D): Full extents of the wall.
    """

    location: WallLocation
    position: Position2D
    size: Size2D

    @classmethod
    def at(cls, location: WallLocation) -> Wall:
        """Build the wall for the given arena edge."""
        y = BOTTOM_WALL if location == "BOTTOM" else TOP_WALL
        arena_width = RIGHT_WALL - LEFT_WALL
        return cls(
            location=location,
            position=Position2D(0.0, y),
            size=Size2D(arena_width + WALL_THICKNESS, WALL_THICKNESS),
        )


@dataclass(frozen=True)
class Goal:
    """
    Vertical goal sensor at an outer x edge of the arena.

    :ivar owner (Player): The player defending this goal; the other one
        scores when the ball touches it.
    :ivar position (Position2D): Center of the goal.
    :ivar size (Size2D): Full extents of the goal.
    """

    owner: Player
    position: Position2D
    size: Size2D

    @property
    def scorer(self) -> Player:
        """Player credited when the ball reaches this goal."""
        return "P2" if self.owner == "P1" else "P1"

    @classmethod
    def of(cls, owner: Player) -> Goal:
        """Build the goal defended by `owner` (P1 defends the left edge)."""
        x = LEFT_WALL if owner == "P1" else RIGHT_WALL
        arena_height = TOP_WALL - BOTTOM_WALL
        return cls(
            owner=owner,
            position=Position2D(x, 0.0),
            size=Size2D(WALL_THICKNESS, arena_height + WALL_THICKNESS),
        )
