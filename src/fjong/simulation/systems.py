"""
Systems making up one Fjong tick.

Each system is a small dataclass with a `step(ctx)` method. `PongSimulation`
sorts its systems by `order` and runs them in that sequence every tick.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.utils import logger

from fjong.config import RuleSet
from fjong.controllers.input import (
    PaddleController,
    apply_command,
    resolve,
)
from fjong.entities import Goal, Paddle
from fjong.physics.collision import collide, reflect
from fjong.physics.response import paddle_bounce, serve
from fjong.simulation.models import PongTickContext


@dataclass
class PaddleInputSystem:
    """
    Resolve each paddle's controller and apply the resulting command.

    Runs during the serve lockout too: keyboard and analog paddles stay
    responsive, the CPU keeps tracking the ball.
    """

    p1: PaddleController
    p2: PaddleController
    name: str = "fjong_paddle_input"
    order: int = 10

    def step(self, ctx: PongTickContext):
        """Resolve and apply both paddle commands."""
        world = ctx.world
        for paddle, controller in zip(world.paddles, (self.p1, self.p2)):
            command = resolve(
                controller, paddle, world.ball, ctx.snapshot, ctx.dt
            )
            apply_command(paddle, command)


@dataclass
class IntegrationSystem:
    """
    Move every entity along its velocity, unless the serve lockout is running.
    """

    name: str = "fjong_integration"
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Advance positions by velocity * dt."""
        if ctx.state.lockout.tick(ctx.dt):
            return

        ball = ctx.world.ball
        x, y = ball.velocity.advance(ball.position.x, ball.position.y, ctx.dt)
        ball.place(x, y)

        for paddle in ctx.world.paddles:
            velocity = paddle.velocity
            if velocity.vx == 0 and velocity.vy == 0:
                continue
            x, y = velocity.advance(paddle.position.x, paddle.position.y, ctx.dt)
            paddle.position.x = x
            paddle.position.y = y
            paddle.clamp()


@dataclass
class CollisionSystem:
    """
    Test the ball against every collider and apply the contact effects.

    Colliders are visited in a fixed order and every overlap is handled on
    its own, even when the ball touches several colliders in one tick.
    """

    rules: RuleSet
    name: str = "fjong_collision"
    order: int = 40

    def _on_goal(self, ctx: PongTickContext, goal: Goal):
        score = ctx.state.score
        rally = score.rally_intensity
        ctx.state.on_goal(goal.scorer)
        if score.rally_intensity != rally:
            logger.debug(f"Rally intensity decayed {rally} -> {score.rally_intensity}")
        serve(ctx.world.ball, self.rules)
        logger.info(f"Goal for {goal.scorer}: {score.p1} - {score.p2}")

    def _on_paddle(self, ctx: PongTickContext, paddle: Paddle):
        rally = ctx.state.on_paddle_hit()
        paddle_bounce(paddle, ctx.world.ball, rally, self.rules)
        logger.debug(
            f"{paddle.player} return, rally intensity {rally}, "
            f"ball velocity ({ctx.world.ball.velocity.vx:.1f}, "
            f"{ctx.world.ball.velocity.vy:.1f})"
        )

    def step(self, ctx: PongTickContext):
        """Detect contacts and apply reflection, scoring and escalation."""
        ball = ctx.world.ball

        for collider in ctx.world.colliders():
            collision = collide(
                ball.position, ball.size, collider.position, collider.size
            )
            if collision is None:
                continue

            # every contact reflects; walls get nothing else
            reflect(ball.velocity, collision)

            if isinstance(collider, Goal):
                self._on_goal(ctx, collider)
            elif isinstance(collider, Paddle):
                self._on_paddle(ctx, collider)
