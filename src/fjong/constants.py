"""
Arena geometry and tuning constants for Fjong.

Coordinates are world units with the origin at the arena center and y pointing
up. Sizes are full extents, not half extents.
"""

from __future__ import annotations

TIME_STEP = 1.0 / 60.0

# x coordinates
LEFT_WALL = -450.0
RIGHT_WALL = 450.0
# y coordinates
BOTTOM_WALL = -300.0
TOP_WALL = 300.0

WALL_THICKNESS = 10.0

PADDLE_SIZE = (20.0, 120.0)
GAP_BETWEEN_PADDLE_AND_GOAL = 60.0
PADDLE_PADDING = 60.0
PADDLE_SPEED = 500.0
ANALOG_RANGE = 250.0

BALL_SIZE = (30.0, 30.0)
BALL_STARTING_POSITION = (0.0, 0.0)
BALL_LAYER = 1.0
BALL_SPEED = 400.0
INITIAL_BALL_DIRECTION = (-0.5, 0.1)

CPU_MAX_SPEED = 800.0

SERVE_LOCKOUT = 0.7

RALLY_DECAY_THRESHOLD = 5
RALLY_DECAY_VALUE = 2
