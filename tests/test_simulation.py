"""Tests for the tick pipeline: integration, contacts, scoring and serving."""

import math

import pytest

from mini_arcade_core.backend.keys import Key

from fjong.config import MatchConfig, RuleSet
from fjong.constants import TIME_STEP
from fjong.controllers import (
    P1_KEYS,
    AnalogControl,
    CpuControl,
    InputSnapshot,
    NoControl,
)
from fjong.simulation import MatchPhase, PongSimulation

LOCKOUT_TICKS = round(0.7 / TIME_STEP)


# =============================================================================
# Setup
# =============================================================================


def test_new_match_places_everything(sim):
    snap = sim.snapshot()

    assert (snap.ball.x, snap.ball.y, snap.ball.layer) == (0.0, 0.0, 1.0)
    assert (snap.p1_paddle.x, snap.p1_paddle.y) == (-390.0, 0.0)
    assert (snap.p2_paddle.x, snap.p2_paddle.y) == (390.0, 0.0)
    assert (snap.p1_score, snap.p2_score, snap.rally_intensity) == (0, 0, 0)
    assert snap.phase is MatchPhase.LIVE

    velocity = sim.world.ball.velocity
    assert math.hypot(velocity.vx, velocity.vy) == pytest.approx(400.0)
    assert velocity.vx < 0 < velocity.vy


def test_new_match_resets_a_played_match(sim, launch):
    launch(sim, 432.0, 0.0, 400.0, 0.0)
    sim.tick()
    assert sim.snapshot().p1_score == 1

    sim.new_match()
    snap = sim.snapshot()
    assert (snap.tick, snap.p1_score, snap.phase) == (0, 0, MatchPhase.LIVE)


def test_systems_run_input_then_integration_then_collision(sim):
    names = [system.name for system in sim.systems]

    assert names == ["fjong_paddle_input", "fjong_integration", "fjong_collision"]
    assert [s.order for s in sim.systems] == sorted(s.order for s in sim.systems)


def test_run_without_ticks_returns_current_state(sim):
    snap = sim.run(0)
    assert snap == sim.snapshot()
    assert snap.tick == 0


def test_integration_moves_ball_by_velocity(sim, launch):
    launch(sim, 0.0, 0.0, 120.0, -60.0)
    snap = sim.tick()

    assert snap.ball.x == pytest.approx(2.0)
    assert snap.ball.y == pytest.approx(-1.0)
    assert snap.tick == 1


def test_snapshot_is_read_only(sim):
    snap = sim.snapshot()
    with pytest.raises(AttributeError):
        snap.p1_score = 5


def test_score_lines(sim):
    sim.state.score.p1 = 3
    assert sim.snapshot().score_lines() == ("P1 score: 3", "P2 score: 0")


# =============================================================================
# Walls
# =============================================================================


def test_bottom_wall_reflects_vertical_velocity_only(sim, launch):
    launch(sim, 0.0, -285.0, 50.0, -100.0)
    sim.tick()

    velocity = sim.world.ball.velocity
    assert velocity.vy == 100.0
    assert velocity.vx == 50.0
    snap = sim.snapshot()
    assert (snap.p1_score, snap.p2_score, snap.rally_intensity) == (0, 0, 0)


def test_no_repeated_flip_while_still_overlapping(sim, launch):
    launch(sim, 0.0, -285.0, 50.0, -100.0)
    for _ in range(10):
        sim.tick()
        assert sim.world.ball.velocity.vy == 100.0


def test_top_wall_reflects(sim, launch):
    launch(sim, 0.0, 285.0, -50.0, 100.0)
    sim.tick()

    assert sim.world.ball.velocity.vy == -100.0


# =============================================================================
# Goals
# =============================================================================


def test_right_goal_scores_for_p1(sim, launch):
    launch(sim, 432.0, 0.0, 400.0, 0.0)
    snap = sim.tick()

    assert (snap.p1_score, snap.p2_score) == (1, 0)
    assert (snap.ball.x, snap.ball.y) == (0.0, 0.0)
    assert snap.phase is MatchPhase.SERVING


def test_left_goal_scores_for_p2(sim, launch):
    launch(sim, -432.0, 0.0, -400.0, 0.0)
    snap = sim.tick()

    assert (snap.p1_score, snap.p2_score) == (0, 1)


def test_goal_resets_velocity_to_serve(sim, launch):
    launch(sim, 432.0, 0.0, 900.0, 150.0)
    sim.tick()

    velocity = sim.world.ball.velocity
    assert (velocity.vx, velocity.vy) == sim.config.rules.serve_velocity()


def test_classic_goal_keeps_reflected_velocity(classic_sim, launch):
    launch(classic_sim, 432.0, 0.0, 400.0, 30.0)
    classic_sim.tick()

    velocity = classic_sim.world.ball.velocity
    assert (velocity.vx, velocity.vy) == (-400.0, 30.0)


def test_ball_frozen_during_serve_lockout(sim, launch):
    launch(sim, 432.0, 0.0, 400.0, 0.0)
    sim.tick()

    for _ in range(LOCKOUT_TICKS):
        snap = sim.tick()
        assert (snap.ball.x, snap.ball.y) == (0.0, 0.0)

    # at most one tick of rounding slack before the serve goes live
    snap = sim.run(2)
    assert snap.phase is MatchPhase.LIVE
    assert snap.ball.x != 0.0


@pytest.mark.parametrize("before, after", [(6, 2), (5, 2), (3, 3), (0, 0)])
def test_goal_rally_decay(sim, launch, before, after):
    sim.state.score.rally_intensity = before
    launch(sim, 432.0, 0.0, 400.0, 0.0)

    assert sim.tick().rally_intensity == after


def test_corner_overlap_applies_every_collider(classic_sim, launch, context):
    # overlaps the top wall and the right goal in the same tick
    launch(classic_sim, 435.0, 285.0, 100.0, 100.0)
    classic_sim.systems[-1].step(context(classic_sim))

    velocity = classic_sim.world.ball.velocity
    assert (velocity.vx, velocity.vy) == (-100.0, -100.0)
    assert classic_sim.state.score.p1 == 1


# =============================================================================
# Paddles
# =============================================================================


def test_center_hit_leaves_horizontally(sim, launch):
    launch(sim, 362.0, 0.0, 300.0, 0.0)
    snap = sim.tick()

    velocity = sim.world.ball.velocity
    assert snap.rally_intensity == 1
    assert velocity.vx == pytest.approx(-(400.0 + 4.0))
    assert velocity.vy == 0.0


def test_edge_hit_approaches_max_angle(sim, launch):
    launch(sim, 362.0, 60.0, 300.0, 0.0)
    sim.tick()

    velocity = sim.world.ball.velocity
    assert velocity.vx < 0 < velocity.vy
    angle = math.atan2(velocity.vy, -velocity.vx)
    assert angle == pytest.approx(math.pi / 4)


def test_left_paddle_sends_ball_right(sim, launch):
    launch(sim, -362.0, -30.0, -300.0, 0.0)
    sim.tick()

    velocity = sim.world.ball.velocity
    # hit below the paddle center: leaves downwards
    assert velocity.vx > 0
    assert velocity.vy < 0


def test_rally_speeds_up_angled_returns(sim, launch):
    sim.state.score.rally_intensity = 9
    launch(sim, 362.0, 0.0, 300.0, 0.0)
    sim.tick()

    assert sim.world.ball.velocity.vx == pytest.approx(-(400.0 + 40.0))


def test_angled_speed_is_capped(launch):
    rules = RuleSet(max_vx=420.0)
    sim = PongSimulation(MatchConfig(rules=rules, p1=NoControl(), p2=NoControl()))
    sim.state.score.rally_intensity = 50
    launch(sim, 362.0, 0.0, 300.0, 0.0)
    sim.tick()

    assert sim.world.ball.velocity.vx == -420.0


def test_classic_escalation_per_axis(classic_sim, launch):
    launch(classic_sim, -362.0, 0.0, -300.0, 50.0)
    classic_sim.tick()

    velocity = classic_sim.world.ball.velocity
    assert velocity.vx == pytest.approx(301.5)
    assert velocity.vy == pytest.approx(51.5)


def test_classic_escalation_is_clamped(classic_sim, launch):
    classic_sim.state.score.rally_intensity = 700
    launch(classic_sim, -362.0, 0.0, -300.0, 50.0)
    classic_sim.tick()

    velocity = classic_sim.world.ball.velocity
    assert velocity.vx == 1000.0
    assert velocity.vy == 200.0


def test_slow_return_is_raised_to_min_speed(launch):
    rules = RuleSet(
        escalation="classic", step=1.5, max_vy=200.0, min_vx=300.0,
        reset_velocity_on_score=False,
    )
    sim = PongSimulation(MatchConfig(rules=rules, p1=NoControl(), p2=NoControl()))
    launch(sim, -364.0, 0.0, -100.0, 10.0)
    sim.tick()

    velocity = sim.world.ball.velocity
    # away from the left paddle, at the minimum horizontal speed
    assert velocity.vx == 300.0
    assert velocity.vy == pytest.approx(11.5)


def test_wall_contact_never_changes_rally(sim, launch):
    sim.state.score.rally_intensity = 4
    launch(sim, 0.0, -285.0, 50.0, -100.0)

    assert sim.tick().rally_intensity == 4


# =============================================================================
# Paddle movement
# =============================================================================


@pytest.mark.parametrize(
    "controller, snapshot",
    [
        (P1_KEYS, InputSnapshot(keys_down=frozenset({Key.Q}))),
        (P1_KEYS, InputSnapshot(keys_down=frozenset({Key.A}))),
        (AnalogControl("pad0"), InputSnapshot(axes={"pad0": 1.0})),
        (AnalogControl("pad0"), InputSnapshot(axes={"pad0": -1.0})),
    ],
)
def test_human_paddle_stays_in_bounds(controller, snapshot):
    sim = PongSimulation(MatchConfig(p1=controller, p2=NoControl()))
    for _ in range(120):
        snap = sim.tick(snapshot)
        assert -240.0 <= snap.p1_paddle.y <= 240.0
    assert abs(snap.p1_paddle.y) == 240.0


def test_cpu_paddle_stays_in_bounds(launch):
    sim = PongSimulation(MatchConfig(p1=NoControl(), p2=CpuControl()))
    for _ in range(600):
        # keep feeding shots at the far corner
        if sim.world.ball.position.x < 0:
            launch(sim, 10.0, 280.0, 900.0, 0.0)
        snap = sim.tick()
        assert -240.0 <= snap.p2_paddle.y <= 240.0


def test_keyboard_paddle_moves_during_lockout(launch):
    sim = PongSimulation(MatchConfig(p1=P1_KEYS, p2=NoControl()))
    sim.state.lockout.restart()
    launch(sim, 100.0, 0.0, 300.0, 0.0)

    snap = sim.tick(InputSnapshot(keys_down=frozenset({Key.Q})))

    assert snap.p1_paddle.y == pytest.approx(500.0 * TIME_STEP)
    assert snap.ball.x == 100.0


def test_cpu_paddle_frozen_during_lockout(launch):
    sim = PongSimulation(MatchConfig(p1=NoControl(), p2=CpuControl()))
    sim.state.lockout.restart()
    launch(sim, 100.0, 100.0, 300.0, 0.0)

    snap = sim.tick()

    assert sim.world.p2_paddle.velocity.vy > 0
    assert snap.p2_paddle.y == 0.0


def test_cpu_meets_ball_at_contact(launch):
    sim = PongSimulation(MatchConfig(p1=NoControl(), p2=CpuControl()))
    ball = launch(sim, 50.0, 150.0, 300.0, 0.0)
    contact_x = 365.0

    for _ in range(200):
        if ball.position.x >= contact_x - 1e-9:
            break
        sim.tick()

    assert sim.world.p2_paddle.position.y == pytest.approx(
        150.0, abs=800.0 * TIME_STEP
    )
