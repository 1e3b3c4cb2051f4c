"""Tests for score, serve lockout and match state."""

import pytest

from fjong.simulation import MatchPhase, MatchState, ScoreState, ServeLockout


# =============================================================================
# ScoreState
# =============================================================================


def test_award_goes_to_named_player():
    score = ScoreState()
    score.award("P1")
    score.award("P2")
    score.award("P2")

    assert (score.p1, score.p2) == (1, 2)


@pytest.mark.parametrize(
    "before, after",
    [(0, 0), (3, 3), (4, 4), (5, 2), (6, 2), (40, 2)],
)
def test_rally_decay(before, after):
    score = ScoreState(rally_intensity=before)
    changed = score.decay_rally()

    assert score.rally_intensity == after
    assert changed == (before != after)


# =============================================================================
# ServeLockout
# =============================================================================


def test_lockout_starts_inactive():
    lockout = ServeLockout()
    assert not lockout.active
    assert lockout.tick(1 / 60) is False


def test_lockout_counts_down_to_live():
    lockout = ServeLockout(duration=0.1)
    lockout.restart()

    locked = 0
    while lockout.tick(1 / 60):
        locked += 1

    # 0.1s at 60Hz: six ticks, a seventh if rounding leaves a sliver
    assert locked in (6, 7)
    assert lockout.remaining == 0.0
    assert not lockout.active


def test_lockout_never_goes_negative():
    lockout = ServeLockout(duration=0.01)
    lockout.restart()
    lockout.tick(1.0)

    assert lockout.remaining == 0.0


# =============================================================================
# MatchState
# =============================================================================


def test_match_starts_live():
    assert MatchState().phase is MatchPhase.LIVE


def test_goal_scores_decays_and_serves():
    state = MatchState(score=ScoreState(p1=2, p2=1, rally_intensity=7))
    state.on_goal("P2")

    assert state.score.p2 == 2
    assert state.score.p1 == 2
    assert state.score.rally_intensity == 2
    assert state.phase is MatchPhase.SERVING
    assert state.lockout.remaining == pytest.approx(0.7)


def test_paddle_hit_increments_rally():
    state = MatchState()
    assert state.on_paddle_hit() == 1
    assert state.on_paddle_hit() == 2
    assert state.score.p1 == state.score.p2 == 0
