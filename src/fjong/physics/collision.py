"""
Axis-aligned box overlap with contact side classification.
"""

from __future__ import annotations

import math
from enum import Enum

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D


class Collision(Enum):
    """Face of box B that box A touched."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


def _axis(
    a_min: float, a_max: float, b_min: float, b_max: float, low, high
) -> tuple[Collision, float]:
    if a_min < b_min < a_max < b_max:
        return low, b_min - a_max
    if b_min < a_min < b_max < a_max:
        return high, a_min - b_max
    return Collision.INSIDE, -math.inf


def collide(
    a_pos: Position2D, a_size: Size2D, b_pos: Position2D, b_size: Size2D
) -> Collision | None:
    """
    Test box A against box B. Both are given by center and full size.

    :return: None when the boxes do not overlap, otherwise the side of B
        that A hit. The axis with the shallower penetration decides; an axis
        on which A does not straddle exactly one edge of B never wins, so
        `INSIDE` is only returned when neither axis does.
    :rtype: Collision | None
    """
    a_half_w, a_half_h = a_size.width / 2, a_size.height / 2
    b_half_w, b_half_h = b_size.width / 2, b_size.height / 2

    a_left, a_right = a_pos.x - a_half_w, a_pos.x + a_half_w
    a_bottom, a_top = a_pos.y - a_half_h, a_pos.y + a_half_h
    b_left, b_right = b_pos.x - b_half_w, b_pos.x + b_half_w
    b_bottom, b_top = b_pos.y - b_half_h, b_pos.y + b_half_h

    if not (
        a_left < b_right
        and a_right > b_left
        and a_bottom < b_top
        and a_top > b_bottom
    ):
        return None

    x_side, x_depth = _axis(
        a_left, a_right, b_left, b_right, Collision.LEFT, Collision.RIGHT
    )
    y_side, y_depth = _axis(
        a_bottom, a_top, b_bottom, b_top, Collision.BOTTOM, Collision.TOP
    )

    if abs(y_depth) < abs(x_depth):
        return y_side
    return x_side


def reflect(velocity: Velocity2D, collision: Collision) -> bool:
    """
    Flip the velocity component that points into the touched face.

    A component that already points away is left alone, so a box that stays
    overlapped for several ticks is not flipped back and forth.

    :return: True when a component was flipped.
    :rtype: bool
    """
    if collision is Collision.LEFT and velocity.vx > 0:
        velocity.vx = -velocity.vx
        return True
    if collision is Collision.RIGHT and velocity.vx < 0:
        velocity.vx = -velocity.vx
        return True
    if collision is Collision.TOP and velocity.vy < 0:
        velocity.vy = -velocity.vy
        return True
    if collision is Collision.BOTTOM and velocity.vy > 0:
        velocity.vy = -velocity.vy
        return True
    return False
