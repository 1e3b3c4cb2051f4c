"""
Paddle controllers: keyboard, analog stick and CPU.
"""

from __future__ import annotations

from .cpu import CpuConfig, PredictiveCpuController
from .input import (
    P1_KEYS,
    P2_KEYS,
    AnalogControl,
    CpuControl,
    Hold,
    InputSnapshot,
    KeyboardControl,
    MoveBy,
    MoveTo,
    NoControl,
    PaddleCommand,
    PaddleController,
    SetVelocity,
    apply_command,
    resolve,
)

__all__ = [
    "AnalogControl",
    "CpuConfig",
    "CpuControl",
    "Hold",
    "InputSnapshot",
    "KeyboardControl",
    "MoveBy",
    "MoveTo",
    "NoControl",
    "P1_KEYS",
    "P2_KEYS",
    "PaddleCommand",
    "PaddleController",
    "PredictiveCpuController",
    "SetVelocity",
    "apply_command",
    "resolve",
]
