import random

import pytest

from codimoji.sim.config import GRID_SIZE, MIN_WALLS, MIN_WATER, ORIGIN
from codimoji.sim.contracts import Grid, Tile, count_tiles
from codimoji.sim.errors import MapGenerationError
from codimoji.sim.map_gen import generate_map


def test_generated_maps_hold_tile_invariants() -> None:
    rng = random.Random(7)
    for _ in range(50):
        grid = generate_map(rng)
        assert len(grid) == GRID_SIZE
        assert all(len(row) == GRID_SIZE for row in grid)
        _assert_generated(grid, walls=MIN_WALLS, water=MIN_WATER)


def test_seeded_generation_is_repeatable() -> None:
    first = generate_map(random.Random(42))
    second = generate_map(random.Random(42))
    assert first == second


def test_generation_fills_a_tight_grid() -> None:
    grid = generate_map(random.Random(3), grid_size=3, min_walls=5, min_water=3)
    _assert_generated(grid, walls=5, water=3)
    assert count_tiles(grid, Tile.GRASS) == 0


def test_generation_rejects_impossible_layouts() -> None:
    with pytest.raises(MapGenerationError):
        generate_map(random.Random(1), grid_size=3, min_walls=6, min_water=3)
    with pytest.raises(MapGenerationError):
        generate_map(random.Random(1), grid_size=1, min_walls=0, min_water=0)


def _assert_generated(grid: Grid, *, walls: int, water: int) -> None:
    ox, oy = ORIGIN
    assert count_tiles(grid, Tile.GOAL) == 1
    assert grid[oy][ox] != Tile.GOAL
    assert count_tiles(grid, Tile.WALL) == walls
    assert count_tiles(grid, Tile.WATER) == water
