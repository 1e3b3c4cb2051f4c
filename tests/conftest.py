"""Shared pytest fixtures for Fjong tests."""

import pytest

from fjong.config import MatchConfig, get_ruleset
from fjong.controllers import InputSnapshot, NoControl
from fjong.simulation import PongSimulation, PongTickContext


# =============================================================================
# Simulation Fixtures
# =============================================================================


@pytest.fixture
def idle_config() -> MatchConfig:
    """Match with no paddle ever moving, angled rules."""
    return MatchConfig(p1=NoControl(), p2=NoControl())


@pytest.fixture
def sim(idle_config) -> PongSimulation:
    """Fresh match with idle paddles."""
    return PongSimulation(idle_config)


@pytest.fixture
def classic_sim() -> PongSimulation:
    """Fresh match with idle paddles and the classic escalation rules."""
    config = MatchConfig(
        rules=get_ruleset("classic"), p1=NoControl(), p2=NoControl()
    )
    return PongSimulation(config)


@pytest.fixture
def launch():
    """Put the ball of a simulation at (x, y) moving with (vx, vy)."""

    def _launch(simulation, x, y, vx, vy):
        ball = simulation.world.ball
        ball.place(x, y)
        ball.velocity.vx = vx
        ball.velocity.vy = vy
        return ball

    return _launch


@pytest.fixture
def context():
    """Build a tick context over a simulation's world and state."""

    def _context(simulation, snapshot=None):
        return PongTickContext(
            world=simulation.world,
            state=simulation.state,
            snapshot=snapshot or InputSnapshot.idle(),
            dt=simulation.config.dt,
        )

    return _context
