"""
Named CPU difficulty presets.
"""

from __future__ import annotations

from fjong.controllers.cpu import CpuConfig
from fjong.errors import ConfigError

DIFFICULTY_PRESETS: dict[str, CpuConfig] = {
    "easy": CpuConfig(max_speed=350.0, engage_line=150.0),
    "normal": CpuConfig(),
    "hard": CpuConfig(max_speed=1200.0),
}


def get_difficulty(name: str) -> CpuConfig:
    """
    Look up a difficulty preset by (case-insensitive) name.

    :raises ConfigError: If no preset has that name.
    """
    try:
        return DIFFICULTY_PRESETS[name.lower()]
    except KeyError as exc:
        choices = ", ".join(DIFFICULTY_PRESETS)
        raise ConfigError(
            f"unknown difficulty {name!r} (expected one of: {choices})"
        ) from exc
