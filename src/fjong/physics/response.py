"""
Ball velocity changes caused by paddle contacts and goals.
"""

from __future__ import annotations

import math

from fjong.config import RuleSet
from fjong.constants import BALL_STARTING_POSITION
from fjong.entities import Ball, Paddle

MAX_BOUNCE_ANGLE = math.pi / 2 - math.pi / 4


def _signed_bonus(value: float, bonus: float) -> float:
    if value > 0:
        return value + bonus
    return value - bonus


def _clamp_component(value: float, low: float, high: float) -> float:
    magnitude = max(low, min(high, abs(value)))
    return math.copysign(magnitude, value)


def bounce_angle(paddle: Paddle, ball: Ball) -> float:
    """
    Outgoing angle in radians for a ball hitting `paddle`.

    0 at the paddle center, approaching -/+MAX_BOUNCE_ANGLE at the edges.
    Positive angles send the ball down.
    """
    relative_intersect = paddle.position.y - ball.position.y
    normalized = relative_intersect / paddle.half_height
    normalized = max(-1.0, min(1.0, normalized))
    return normalized * MAX_BOUNCE_ANGLE


def clamp_velocity(ball: Ball, rules: RuleSet):
    """Keep both velocity components inside the ruleset limits."""
    velocity = ball.velocity
    velocity.vx = _clamp_component(velocity.vx, rules.min_vx, rules.max_vx)
    velocity.vy = _clamp_component(velocity.vy, 0.0, rules.max_vy)


def paddle_bounce(paddle: Paddle, ball: Ball, rally: int, rules: RuleSet):
    """
    Send the ball back after it hit `paddle`, faster the longer the rally.

    The ball must already be reflected off the paddle; the angled rules
    overwrite the direction, the classic rules keep it.
    """
    velocity = ball.velocity
    bonus = rally * rules.step

    if rules.escalation == "angled":
        angle = bounce_angle(paddle, ball)
        # away from the paddle, towards the other side
        direction = -paddle.side
        velocity.vx = direction * rules.base_speed * math.cos(angle)
        velocity.vy = -rules.base_speed * math.sin(angle)
        if velocity.vx != 0:
            velocity.vx = _signed_bonus(velocity.vx, bonus)
        if velocity.vy != 0:
            velocity.vy = _signed_bonus(velocity.vy, bonus)
    else:
        velocity.vx = _signed_bonus(velocity.vx, bonus)
        velocity.vy = _signed_bonus(velocity.vy, bonus)

    clamp_velocity(ball, rules)


def serve(ball: Ball, rules: RuleSet):
    """Put the ball back on its starting spot after a goal."""
    ball.place(*BALL_STARTING_POSITION)
    if rules.reset_velocity_on_score:
        vx, vy = rules.serve_velocity()
        ball.velocity.vx = vx
        ball.velocity.vy = vy
