"""Random map generation with rejection sampling."""

from __future__ import annotations

import random

from codimoji.logger import setup_logger
from codimoji.sim.config import GRID_SIZE, MIN_WALLS, MIN_WATER, ORIGIN
from codimoji.sim.contracts import Grid, Tile, empty_grid
from codimoji.sim.errors import MapGenerationError

logger = setup_logger(__name__)


def generate_map(
    rng: random.Random | None = None,
    *,
    grid_size: int = GRID_SIZE,
    min_walls: int = MIN_WALLS,
    min_water: int = MIN_WATER,
) -> Grid:
    """Build a grass grid with one goal, then scatter walls and water.

    The origin is never the goal. Walls and water only land on cells that are
    still grass; candidates are redrawn until one fits.
    """
    rng = rng or random.Random()
    if grid_size < 2 or 1 + min_walls + min_water > grid_size * grid_size:
        raise MapGenerationError(
            f"{min_walls} walls and {min_water} water tiles do not fit on a "
            f"{grid_size}x{grid_size} grid."
        )

    grid = empty_grid(grid_size)
    goal_x, goal_y = ORIGIN
    while (goal_x, goal_y) == ORIGIN:
        goal_x = rng.randrange(grid_size)
        goal_y = rng.randrange(grid_size)
    grid[goal_y][goal_x] = Tile.GOAL

    retries = 0
    for tile, count in ((Tile.WALL, min_walls), (Tile.WATER, min_water)):
        for _ in range(count):
            retries += _place_on_grass(grid, tile, rng)

    logger.debug(
        "Generated %dx%d map, goal at (%d, %d), %d placement retries.",
        grid_size,
        grid_size,
        goal_x,
        goal_y,
        retries,
    )
    return grid


def _place_on_grass(grid: Grid, tile: Tile, rng: random.Random) -> int:
    size = len(grid)
    retries = 0
    while True:
        x = rng.randrange(size)
        y = rng.randrange(size)
        if grid[y][x] == Tile.GRASS:
            grid[y][x] = tile
            return retries
        retries += 1
