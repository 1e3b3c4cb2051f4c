"""
Per-paddle input resolution.

Every paddle gets one controller at setup. Each tick `resolve` turns the
controller plus the current input snapshot into a `PaddleCommand`, and
`apply_command` writes that command to the paddle. Nothing downstream needs to
know which kind of controller produced the motion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

from mini_arcade_core.backend.keys import Key

from fjong.constants import ANALOG_RANGE, PADDLE_SPEED
from fjong.controllers.cpu import CpuConfig, PredictiveCpuController
from fjong.entities import Ball, Paddle


@dataclass(frozen=True)
class InputSnapshot:
    """
    Resolved device state for one tick.

    :ivar keys_down (frozenset[Key]): Keys currently held.
    :ivar axes (Mapping[str, float]): Analog axis value per connected device
        id. A device missing from the mapping is not connected.
    """

    keys_down: frozenset[Key] = frozenset()
    axes: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def idle(cls) -> InputSnapshot:
        """Snapshot with nothing held and no device connected."""
        return cls()


# --- Controllers ------------------------------------------------------------


@dataclass(frozen=True)
class KeyboardControl:
    """Two keys: `up` moves the paddle up, `down` moves it down."""

    up: Key
    down: Key
    speed: float = PADDLE_SPEED


@dataclass(frozen=True)
class AnalogControl:
    """
    Analog stick on `device`. The axis sets the paddle y directly.

    :ivar fallback (KeyboardControl | None): Keys used when the device is
        not connected.
    :ivar overrides_keyboard (bool): When True a connected device always
        wins; when False held fallback keys take over from the stick.
    """

    device: str
    fallback: KeyboardControl | None = None
    overrides_keyboard: bool = True
    axis_range: float = ANALOG_RANGE


@dataclass(frozen=True)
class CpuControl:
    """Predictive CPU control."""

    config: CpuConfig = field(default_factory=CpuConfig)


@dataclass(frozen=True)
class NoControl:
    """Paddle never moves."""


PaddleController = Union[KeyboardControl, AnalogControl, CpuControl, NoControl]

P1_KEYS = KeyboardControl(up=Key.Q, down=Key.A)
P2_KEYS = KeyboardControl(up=Key.O, down=Key.L)


# --- Commands ---------------------------------------------------------------


@dataclass(frozen=True)
class MoveBy:
    """Shift the paddle y by `dy`."""

    dy: float


@dataclass(frozen=True)
class MoveTo:
    """Put the paddle center at `y`."""

    y: float


@dataclass(frozen=True)
class SetVelocity:
    """Drive the paddle with vertical velocity `vy`; the integrator moves it."""

    vy: float


@dataclass(frozen=True)
class Hold:
    """Leave the paddle where it is."""


PaddleCommand = Union[MoveBy, MoveTo, SetVelocity, Hold]


def _keyboard_direction(control: KeyboardControl, snapshot: InputSnapshot):
    direction = 0.0
    if control.down in snapshot.keys_down:
        direction -= 1.0
    if control.up in snapshot.keys_down:
        direction += 1.0
    return direction


def _resolve_keyboard(
    control: KeyboardControl, snapshot: InputSnapshot, dt: float
) -> PaddleCommand:
    direction = _keyboard_direction(control, snapshot)
    if direction == 0.0:
        return Hold()
    return MoveBy(direction * control.speed * dt)


def _resolve_analog(
    control: AnalogControl, snapshot: InputSnapshot, dt: float
) -> PaddleCommand:
    axis = snapshot.axes.get(control.device)
    fallback = control.fallback

    if axis is None:
        if fallback is None:
            return Hold()
        return _resolve_keyboard(fallback, snapshot, dt)

    if (
        not control.overrides_keyboard
        and fallback is not None
        and _keyboard_direction(fallback, snapshot) != 0.0
    ):
        return _resolve_keyboard(fallback, snapshot, dt)

    axis = max(-1.0, min(1.0, axis))
    return MoveTo(axis * control.axis_range)


def resolve(
    controller: PaddleController,
    paddle: Paddle,
    ball: Ball,
    snapshot: InputSnapshot,
    dt: float,
) -> PaddleCommand:
    """
    Decide what `paddle` does this tick.

    :param controller: The controller chosen for this paddle at setup.
    :param paddle: The paddle being driven.
    :param ball: The ball, read by the CPU controller.
    :param snapshot: Device state for this tick.
    :param dt: Fixed timestep in seconds.
    """
    if isinstance(controller, KeyboardControl):
        return _resolve_keyboard(controller, snapshot, dt)
    if isinstance(controller, AnalogControl):
        return _resolve_analog(controller, snapshot, dt)
    if isinstance(controller, CpuControl):
        cpu = PredictiveCpuController(controller.config)
        return SetVelocity(cpu.compute_velocity(paddle, ball))
    return Hold()


def apply_command(paddle: Paddle, command: PaddleCommand):
    """
    Write `command` to `paddle` and clamp it.

    Position commands also zero the paddle velocity so only velocity-driven
    paddles are ever moved by the integrator.
    """
    if isinstance(command, SetVelocity):
        paddle.velocity.vx = 0.0
        paddle.velocity.vy = command.vy
        return

    paddle.velocity.stop()
    if isinstance(command, MoveBy):
        paddle.position.y += command.dy
    elif isinstance(command, MoveTo):
        paddle.position.y = command.y
    paddle.clamp()
