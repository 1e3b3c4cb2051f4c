"""
The Fjong tick pipeline.
"""

from __future__ import annotations

from mini_arcade_core.utils import logger

from fjong.config import MatchConfig
from fjong.controllers.input import InputSnapshot
from fjong.simulation.models import (
    EntitySnapshot,
    MatchSnapshot,
    MatchState,
    PongTickContext,
    PongWorld,
    ServeLockout,
)
from fjong.simulation.systems import (
    CollisionSystem,
    IntegrationSystem,
    PaddleInputSystem,
)


class PongSimulation:
    """
    Owns one match and advances it one fixed tick at a time.

    A tick always runs paddle input (CPU included), then integration, then
    collision response. Integration and CPU control read the state left by
    the previous tick's collisions; collision response reads the freshly
    integrated positions.
    """

    def __init__(self, config: MatchConfig | None = None):
        """
        :param config: Rules, controllers and timing of the match.
        :type config: MatchConfig, optional
        """
        self.config = config or MatchConfig()
        self.systems = sorted(
            [
                PaddleInputSystem(p1=self.config.p1, p2=self.config.p2),
                IntegrationSystem(),
                CollisionSystem(rules=self.config.rules),
            ],
            key=lambda system: system.order,
        )
        self.world: PongWorld
        self.state: MatchState
        self.ticks = 0
        self.new_match()

    def new_match(self):
        """Place every entity at its start and zero the score."""
        self.world = PongWorld.create(self.config.rules.serve_velocity())
        self.state = MatchState(
            lockout=ServeLockout(duration=self.config.serve_lockout)
        )
        self.ticks = 0
        logger.info(
            f"New match: {self.config.rules.escalation} rules, "
            f"P1={type(self.config.p1).__name__}, "
            f"P2={type(self.config.p2).__name__}"
        )

    def tick(self, snapshot: InputSnapshot | None = None) -> MatchSnapshot:
        """
        Run one fixed timestep.

        :param snapshot: Device state for this tick; idle when omitted.
        :return: The state after the tick.
        """
        ctx = PongTickContext(
            world=self.world,
            state=self.state,
            snapshot=snapshot or InputSnapshot.idle(),
            dt=self.config.dt,
        )
        for system in self.systems:
            system.step(ctx)
        self.ticks += 1
        return self.snapshot()

    def run(self, ticks: int, snapshot: InputSnapshot | None = None):
        """Run `ticks` ticks with the same input and return the last snapshot."""
        result = self.snapshot()
        for _ in range(ticks):
            result = self.tick(snapshot)
        return result

    def snapshot(self) -> MatchSnapshot:
        """Read-only view of the current transforms and score."""
        ball = self.world.ball
        p1, p2 = self.world.paddles
        score = self.state.score
        return MatchSnapshot(
            tick=self.ticks,
            ball=EntitySnapshot(ball.position.x, ball.position.y, ball.layer),
            p1_paddle=EntitySnapshot(p1.position.x, p1.position.y),
            p2_paddle=EntitySnapshot(p2.position.x, p2.position.y),
            p1_score=score.p1,
            p2_score=score.p2,
            rally_intensity=score.rally_intensity,
            phase=self.state.phase,
        )
