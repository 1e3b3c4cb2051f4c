"""
Headless entry point for Fjong.
"""

from __future__ import annotations

import argparse

from mini_arcade_core.utils import logger

from fjong.config import RULESETS, MatchConfig, get_ruleset
from fjong.constants import TIME_STEP
from fjong.controllers.input import CpuControl
from fjong.difficulty import DIFFICULTY_PRESETS, get_difficulty
from fjong.simulation.clock import FixedStepClock
from fjong.simulation.models import MatchSnapshot
from fjong.simulation.pipeline import PongSimulation

FRAME_TIME = 1.0 / 144.0


def build_parser() -> argparse.ArgumentParser:
    """Command line options of the headless runner."""
    parser = argparse.ArgumentParser(
        prog="fjong-headless",
        description="Run a CPU vs CPU Fjong match without a window.",
    )
    parser.add_argument(
        "--seconds", type=float, default=60.0, help="simulated match length"
    )
    parser.add_argument(
        "--difficulty",
        default="normal",
        choices=sorted(DIFFICULTY_PRESETS),
        help="CPU preset used by both paddles",
    )
    parser.add_argument(
        "--rules", default="angled", choices=sorted(RULESETS), help="ruleset"
    )
    return parser


def simulate(
    seconds: float, difficulty: str = "normal", rules: str = "angled"
) -> MatchSnapshot:
    """
    Play a CPU vs CPU match for `seconds` of simulated time.

    Frames arrive at a display-like rate and are folded into fixed ticks by
    `FixedStepClock`, the way a windowed frontend would drive the core.
    """
    cpu = CpuControl(get_difficulty(difficulty))
    config = MatchConfig(rules=get_ruleset(rules), p1=cpu, p2=cpu)
    sim = PongSimulation(config)
    clock = FixedStepClock(sim.tick, TIME_STEP)

    elapsed = 0.0
    while elapsed < seconds:
        clock.advance(FRAME_TIME)
        elapsed += FRAME_TIME

    result = sim.snapshot()
    p1_line, p2_line = result.score_lines()
    logger.info(f"Final after {result.tick} ticks: {p1_line}, {p2_line}")
    return result


def run(argv: list[str] | None = None):
    """
    Main entry point for the headless runner.

    - Parses the match length, CPU difficulty and ruleset.
    - Runs the match and logs the final score.
    """
    args = build_parser().parse_args(argv)
    logger.info("Starting headless Fjong match...")
    simulate(args.seconds, args.difficulty, args.rules)


if __name__ == "__main__":
    run()
