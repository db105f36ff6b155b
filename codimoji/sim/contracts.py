"""Core data contracts for maps and console output."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from codimoji.sim.config import GRID_SIZE


class Tile(IntEnum):
    GRASS = 0
    WALL = 1
    WATER = 2
    GOAL = 3


Grid = list[list[Tile]]

BLOCKING_TILES: frozenset[Tile] = frozenset({Tile.WALL, Tile.WATER})


class OutputKind(str, Enum):
    NORMAL = "normal"
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"


class OutputLine(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    kind: OutputKind = OutputKind.NORMAL


class MapDocument(BaseModel):
    """A named, saved map as stored in the map library."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    grid: list[list[Tile]]

    @model_validator(mode="after")
    def validate_grid(self) -> "MapDocument":
        if len(self.grid) != GRID_SIZE:
            raise ValueError(f"grid must have {GRID_SIZE} rows")
        for row in self.grid:
            if len(row) != GRID_SIZE:
                raise ValueError(f"grid rows must have {GRID_SIZE} tiles")
        return self


def empty_grid(size: int = GRID_SIZE) -> Grid:
    return [[Tile.GRASS for _ in range(size)] for _ in range(size)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def count_tiles(grid: Grid, tile: Tile) -> int:
    return sum(1 for row in grid for cell in row if cell == tile)

