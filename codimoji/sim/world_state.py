"""World and agent runtime state for the grid game."""

from __future__ import annotations

from dataclasses import dataclass, field

from codimoji.sim.config import GRID_SIZE, ORIGIN
from codimoji.sim.contracts import BLOCKING_TILES, Grid, Tile, empty_grid


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


START = Position(*ORIGIN)


@dataclass
class AgentState:
    position: Position = START
    target: Position = START
    dead: bool = False


@dataclass
class WorldState:
    """The active map plus the single agent walking on it.

    Predicates do no validation of their own: callers check bounds with
    `is_out_of_bounds` before asking about tiles.
    """

    grid: Grid = field(default_factory=empty_grid)
    agent: AgentState = field(default_factory=AgentState)
    size: int = GRID_SIZE

    def is_out_of_bounds(self, pos: Position) -> bool:
        return pos.x < 0 or pos.x >= self.size or pos.y < 0 or pos.y >= self.size

    def tile_at(self, pos: Position) -> Tile:
        return self.grid[pos.y][pos.x]

    def is_collision(self, pos: Position) -> bool:
        return self.tile_at(pos) in BLOCKING_TILES

    def is_goal(self, pos: Position) -> bool:
        return self.tile_at(pos) == Tile.GOAL

    def set_position(self, pos: Position) -> None:
        self.agent.position = pos
        self.agent.target = pos

    def set_target(self, pos: Position) -> None:
        self.agent.target = pos

    def load_map(self, grid: Grid) -> None:
        self.grid = grid

    def reset_agent(self) -> None:
        self.agent = AgentState()
