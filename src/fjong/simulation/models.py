"""
Fjong match model: world entities, score/serve state and tick context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from fjong.constants import (
    BALL_SIZE,
    BALL_STARTING_POSITION,
    GAP_BETWEEN_PADDLE_AND_GOAL,
    LEFT_WALL,
    PADDLE_SIZE,
    RALLY_DECAY_THRESHOLD,
    RALLY_DECAY_VALUE,
    RIGHT_WALL,
    SERVE_LOCKOUT,
)
from fjong.controllers.input import InputSnapshot
from fjong.entities import Ball, Goal, Paddle, Player, Wall


@dataclass
class ScoreState:
    """
    Score state for a match.

    :ivar p1 (int): Goals scored by the left player.
    :ivar p2 (int): Goals scored by the right player.
    :ivar rally_intensity (int): Paddle contacts counter driving ball speed.
    """

    p1: int = 0
    p2: int = 0
    rally_intensity: int = 0

    def award(self, player: Player):
        """Give `player` one goal."""
        if player == "P1":
            self.p1 += 1
        else:
            self.p2 += 1

    def decay_rally(self) -> bool:
        """
        Soft reset after a goal: a long rally drops back to a low value.

        :return: True when the counter changed.
        """
        if self.rally_intensity >= RALLY_DECAY_THRESHOLD:
            self.rally_intensity = RALLY_DECAY_VALUE
            return True
        return False


@dataclass
class ServeLockout:
    """
    Countdown after a goal during which no position is integrated.

    :ivar duration (float): Seconds the lockout lasts once restarted.
    :ivar remaining (float): Seconds left; 0 means the ball is live.
    """

    duration: float = SERVE_LOCKOUT
    remaining: float = 0.0

    @property
    def active(self) -> bool:
        """Whether positions are currently frozen."""
        return self.remaining > 0

    def restart(self):
        """Start a full lockout."""
        self.remaining = self.duration

    def tick(self, dt: float) -> bool:
        """
        Count down by one tick.

        :return: True when this tick is locked out.
        """
        if not self.active:
            return False
        self.remaining = max(0.0, self.remaining - dt)
        return True


class MatchPhase(Enum):
    """Serve state machine phases."""

    SERVING = "serving"
    LIVE = "live"


@dataclass
class MatchState:
    """
    Mutable match state shared by the systems of a tick.

    :ivar score (ScoreState): Scores and rally counter.
    :ivar lockout (ServeLockout): Post-goal serve lockout.
    """

    score: ScoreState = field(default_factory=ScoreState)
    lockout: ServeLockout = field(default_factory=ServeLockout)

    @property
    def phase(self) -> MatchPhase:
        """Current serve phase."""
        if self.lockout.active:
            return MatchPhase.SERVING
        return MatchPhase.LIVE

    def on_goal(self, scorer: Player):
        """Apply the score side of a goal: rally decay, point, lockout."""
        self.score.decay_rally()
        self.score.award(scorer)
        self.lockout.restart()

    def on_paddle_hit(self) -> int:
        """Count a paddle return and give back the new rally intensity."""
        self.score.rally_intensity += 1
        return self.score.rally_intensity


# Justification: one attribute per arena entity
# pylint: disable=too-many-instance-attributes
@dataclass
class PongWorld:
    """
    Every entity of a match. Built once through `create`.

    :ivar ball (Ball): The ball.
    :ivar p1_paddle (Paddle): Left paddle.
    :ivar p2_paddle (Paddle): Right paddle.
    :ivar bottom_wall (Wall): Bottom wall.
    :ivar top_wall (Wall): Top wall.
    :ivar p1_goal (Goal): Left goal, defended by P1.
    :ivar p2_goal (Goal): Right goal, defended by P2.
    """

    ball: Ball
    p1_paddle: Paddle
    p2_paddle: Paddle
    bottom_wall: Wall
    top_wall: Wall
    p1_goal: Goal
    p2_goal: Goal

    @classmethod
    def create(cls, serve_velocity: tuple[float, float]) -> PongWorld:
        """Place every entity at its starting transform."""
        pad_w, pad_h = PADDLE_SIZE
        ball_w, ball_h = BALL_SIZE
        start_x, start_y = BALL_STARTING_POSITION
        vx, vy = serve_velocity

        return cls(
            ball=Ball(
                position=Position2D(start_x, start_y),
                size=Size2D(ball_w, ball_h),
                velocity=Velocity2D(vx, vy),
            ),
            p1_paddle=Paddle(
                player="P1",
                position=Position2D(LEFT_WALL + GAP_BETWEEN_PADDLE_AND_GOAL, 0.0),
                size=Size2D(pad_w, pad_h),
                velocity=Velocity2D(0.0, 0.0),
            ),
            p2_paddle=Paddle(
                player="P2",
                position=Position2D(RIGHT_WALL - GAP_BETWEEN_PADDLE_AND_GOAL, 0.0),
                size=Size2D(pad_w, pad_h),
                velocity=Velocity2D(0.0, 0.0),
            ),
            bottom_wall=Wall.at("BOTTOM"),
            top_wall=Wall.at("TOP"),
            p1_goal=Goal.of("P1"),
            p2_goal=Goal.of("P2"),
        )

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        """Both paddles, P1 first."""
        return self.p1_paddle, self.p2_paddle

    def colliders(self) -> tuple[Paddle | Wall | Goal, ...]:
        """Everything the ball is tested against, in resolution order."""
        return (
            self.p1_paddle,
            self.p2_paddle,
            self.bottom_wall,
            self.top_wall,
            self.p1_goal,
            self.p2_goal,
        )


# pylint: enable=too-many-instance-attributes


@dataclass(frozen=True)
class EntitySnapshot:
    """Read-only transform of one moving entity."""

    x: float
    y: float
    layer: float = 0.0


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Read-only view of a match between two ticks.

    :ivar tick (int): Number of ticks run so far.
    :ivar ball (EntitySnapshot): Ball transform.
    :ivar p1_paddle (EntitySnapshot): Left paddle transform.
    :ivar p2_paddle (EntitySnapshot): Right paddle transform.
    :ivar p1_score (int): Left player score.
    :ivar p2_score (int): Right player score.
    :ivar rally_intensity (int): Current rally intensity.
    :ivar phase (MatchPhase): Serve phase.
    """

    tick: int
    ball: EntitySnapshot
    p1_paddle: EntitySnapshot
    p2_paddle: EntitySnapshot
    p1_score: int
    p2_score: int
    rally_intensity: int
    phase: MatchPhase

    def score_lines(self) -> tuple[str, str]:
        """Scoreboard texts for both players."""
        return f"P1 score: {self.p1_score}", f"P2 score: {self.p2_score}"


@dataclass
class PongTickContext:
    """
    Context for a single simulation tick.

    :ivar world (PongWorld): Match entities.
    :ivar state (MatchState): Score and serve state.
    :ivar snapshot (InputSnapshot): Device state for this tick.
    :ivar dt (float): Fixed timestep in seconds.
    """

    world: PongWorld
    state: MatchState
    snapshot: InputSnapshot
    dt: float
