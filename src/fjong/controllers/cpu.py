"""
Predictive CPU paddle controller for Fjong.
"""

from __future__ import annotations

from dataclasses import dataclass

from fjong.constants import CPU_MAX_SPEED
from fjong.entities import Ball, Paddle
from fjong.errors import ConfigError


@dataclass(frozen=True)
class CpuConfig:
    """
    CPU difficulty settings.

    - max_speed: fastest commanded paddle speed (units/sec)
    - engage_line: x offset from the midline, towards the CPU side, the ball
      has to cross before the CPU starts moving
    """

    max_speed: float = CPU_MAX_SPEED
    engage_line: float = 0.0

    def __post_init__(self):
        if self.max_speed <= 0:
            raise ConfigError(f"max_speed must be positive, got {self.max_speed}")
        if self.engage_line < 0:
            raise ConfigError(
                f"engage_line must not be negative, got {self.engage_line}"
            )


class PredictiveCpuController:
    """
    Linear interception:
    - Waits until the ball heads for its side and crosses the engage line.
    - Picks the constant velocity that puts the paddle center on the ball's
      y by the time the ball reaches the paddle face.
    - Recomputed every tick, so the estimate corrects itself.
    """

    def __init__(self, config: CpuConfig | None = None):
        """
        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.config = config or CpuConfig()

    def engaged(self, paddle: Paddle, ball: Ball) -> bool:
        """Whether the ball is coming at `paddle` and past the engage line."""
        side = paddle.side
        if ball.velocity.vx * side <= 0:
            return False
        return ball.position.x * side > self.config.engage_line

    def time_to_contact(self, paddle: Paddle, ball: Ball) -> float | None:
        """
        Seconds until the ball's leading edge reaches the paddle face.

        :return: None when the ball has no horizontal speed or is already
            past the face.
        :rtype: float | None
        """
        vx = ball.velocity.vx
        if vx == 0:
            return None

        contact_x = paddle.position.x - paddle.side * (
            paddle.half_width + ball.half_width
        )
        ttc = (contact_x - ball.position.x) / vx
        if ttc <= 0:
            return None
        return ttc

    def compute_velocity(self, paddle: Paddle, ball: Ball) -> float:
        """
        Vertical velocity for `paddle` this tick; 0.0 parks it.
        """
        if not self.engaged(paddle, ball):
            return 0.0

        ttc = self.time_to_contact(paddle, ball)
        if ttc is None:
            return 0.0

        distance_needed = paddle.position.y - ball.position.y
        wanted = -distance_needed / ttc

        limit = self.config.max_speed
        return max(-limit, min(limit, wanted))
