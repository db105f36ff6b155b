"""Grid and pacing constants for the game."""

from __future__ import annotations

GRID_SIZE = 12
MIN_WALLS = 20
MIN_WATER = 10

DEFAULT_GAME_SPEED = 0.5
MIN_GAME_SPEED = 0.05
MAX_GAME_SPEED = 5.0
SPEED_STEP = 0.1

ORIGIN: tuple[int, int] = (0, 0)


def clamp_game_speed(value: float) -> float:
    return max(MIN_GAME_SPEED, min(MAX_GAME_SPEED, value))
