"""
Accumulator that turns variable frame time into whole fixed ticks.
"""

from __future__ import annotations

from typing import Callable

from mini_arcade_core.utils import logger

from fjong.errors import ConfigError


class FixedStepClock:
    """
    Feeds a fixed-timestep simulation from a variable-rate frame loop.

    Frame time accumulates until it covers whole ticks. A long stall would
    otherwise make the simulation spiral, so at most `max_ticks` ticks run
    per `advance` and any older backlog is dropped.
    """

    def __init__(
        self,
        tick: Callable[[], object],
        dt: float,
        *,
        max_ticks: int = 8,
    ):
        """
        :param tick: Called once per fixed tick.
        :param dt: Fixed timestep in seconds.
        :param max_ticks: Most ticks run by a single `advance` call.
        """
        if dt <= 0:
            raise ConfigError(f"dt must be positive, got {dt}")
        if max_ticks < 1:
            raise ConfigError(f"max_ticks must be at least 1, got {max_ticks}")
        self._tick = tick
        self.dt = dt
        self.max_ticks = max_ticks
        self.accumulator = 0.0

    @property
    def alpha(self) -> float:
        """Fraction of a tick left over, for render interpolation."""
        return self.accumulator / self.dt

    def advance(self, frame_time: float) -> int:
        """
        Add `frame_time` seconds and run every whole tick now due.

        :return: Number of ticks run.
        """
        self.accumulator += max(0.0, frame_time)

        ticks = 0
        while self.accumulator >= self.dt and ticks < self.max_ticks:
            self._tick()
            self.accumulator -= self.dt
            ticks += 1

        if self.accumulator >= self.dt:
            dropped = self.accumulator - self.accumulator % self.dt
            logger.warning(f"Simulation behind, dropping {dropped:.3f}s of backlog")
            self.accumulator %= self.dt

        return ticks
