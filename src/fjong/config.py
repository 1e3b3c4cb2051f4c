"""
Match configuration for Fjong.

`RuleSet` groups the ball physics knobs, `MatchConfig` bundles a ruleset with
the serve lockout and the controller chosen for each paddle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fjong.constants import (
    BALL_SPEED,
    INITIAL_BALL_DIRECTION,
    SERVE_LOCKOUT,
    TIME_STEP,
)
from fjong.controllers.input import (
    P1_KEYS,
    P2_KEYS,
    CpuControl,
    PaddleController,
)
from fjong.errors import ConfigError

Escalation = Literal["classic", "angled"]


@dataclass(frozen=True)
class RuleSet:
    """
    Ball physics rules.

    :ivar escalation (Escalation): "classic" keeps the reflected direction
        and adds `rally * step` per axis; "angled" sets the direction from
        where the ball hit the paddle, then adds `rally * step`.
    :ivar step (float): Speed bonus per rally point.
    :ivar base_speed (float): Ball speed at serve and off a paddle (angled).
    :ivar max_vx (float): Largest horizontal speed magnitude.
    :ivar max_vy (float): Largest vertical speed magnitude.
    :ivar min_vx (float): Smallest horizontal speed magnitude after a
        paddle contact.
    :ivar reset_velocity_on_score (bool): Re-serve with the initial velocity
        after a goal instead of keeping the reflected one.
    """

    escalation: Escalation = "angled"
    step: float = 4.0
    base_speed: float = BALL_SPEED
    max_vx: float = 1000.0
    max_vy: float = 600.0
    min_vx: float = 0.0
    reset_velocity_on_score: bool = True

    def __post_init__(self):
        if self.escalation not in ("classic", "angled"):
            raise ConfigError(f"unknown escalation {self.escalation!r}")
        if self.base_speed <= 0 or self.max_vx <= 0 or self.max_vy <= 0:
            raise ConfigError("ball speeds must be positive")
        if not 0 <= self.min_vx <= self.max_vx:
            raise ConfigError(
                f"min_vx must be within [0, {self.max_vx}], got {self.min_vx}"
            )

    def serve_velocity(self) -> tuple[float, float]:
        """Initial ball velocity: the serve direction scaled to base speed."""
        dx, dy = INITIAL_BALL_DIRECTION
        length = (dx * dx + dy * dy) ** 0.5
        return dx / length * self.base_speed, dy / length * self.base_speed


RULESETS: dict[str, RuleSet] = {
    "classic": RuleSet(
        escalation="classic",
        step=1.5,
        max_vx=1000.0,
        max_vy=200.0,
        reset_velocity_on_score=False,
    ),
    "angled": RuleSet(),
}


def get_ruleset(name: str) -> RuleSet:
    """
    Look up a ruleset by (case-insensitive) name.

    :raises ConfigError: If no ruleset has that name.
    """
    try:
        return RULESETS[name.lower()]
    except KeyError as exc:
        choices = ", ".join(RULESETS)
        raise ConfigError(
            f"unknown ruleset {name!r} (expected one of: {choices})"
        ) from exc


@dataclass(frozen=True)
class MatchConfig:
    """
    Everything needed to start a match.

    :ivar rules (RuleSet): Ball physics rules.
    :ivar p1 (PaddleController): Controller of the left paddle.
    :ivar p2 (PaddleController): Controller of the right paddle.
    :ivar serve_lockout (float): Seconds positions stay frozen after a goal.
    :ivar dt (float): Fixed timestep in seconds.
    """

    rules: RuleSet = field(default_factory=RuleSet)
    p1: PaddleController = P1_KEYS
    p2: PaddleController = field(default_factory=CpuControl)
    serve_lockout: float = SERVE_LOCKOUT
    dt: float = TIME_STEP

    def __post_init__(self):
        if self.dt <= 0:
            raise ConfigError(f"dt must be positive, got {self.dt}")
        if self.serve_lockout < 0:
            raise ConfigError(
                f"serve_lockout must not be negative, got {self.serve_lockout}"
            )

    @classmethod
    def versus(cls, **overrides) -> MatchConfig:
        """Two keyboard players."""
        return cls(p1=P1_KEYS, p2=P2_KEYS, **overrides)
