"""Shared helpers for rendering the game grid."""

from __future__ import annotations

from rich.text import Text

from codimoji.sim.contracts import Grid, Tile
from codimoji.sim.world_state import Position, WorldState

TILE_GLYPHS = {
    Tile.GRASS: ".",
    Tile.WALL: "#",
    Tile.WATER: "~",
    Tile.GOAL: "G",
}

TILE_STYLES = {
    Tile.GRASS: "green3",
    Tile.WALL: "grey50",
    Tile.WATER: "bright_blue",
    Tile.GOAL: "bold yellow",
}

AGENT_GLYPH = "@"
DEAD_AGENT_GLYPH = "X"
AGENT_STYLE = "bold bright_red"
DEAD_AGENT_STYLE = "bold red reverse"
CURSOR_STYLE = "reverse"


def render_grid_lines(
    grid: Grid,
    *,
    agent: Position | None = None,
    dead: bool = False,
    cursor: tuple[int, int] | None = None,
) -> list[Text]:
    lines: list[Text] = []
    for y, row in enumerate(grid):
        line = Text()
        for x, tile in enumerate(row):
            glyph = TILE_GLYPHS.get(tile, "?")
            style = TILE_STYLES.get(tile, "grey70")
            if agent is not None and (x, y) == agent.as_tuple():
                glyph = DEAD_AGENT_GLYPH if dead else AGENT_GLYPH
                style = DEAD_AGENT_STYLE if dead else AGENT_STYLE
            if cursor is not None and (x, y) == cursor:
                style = f"{style} {CURSOR_STYLE}"
            line.append(glyph, style=style)
            if x < len(row) - 1:
                line.append(" ")
        lines.append(line)
    return lines


def render_world_lines(world: WorldState) -> list[Text]:
    return render_grid_lines(
        world.grid, agent=world.agent.position, dead=world.agent.dead
    )


def render_legend() -> Text:
    legend = Text()
    for tile, name in (
        (Tile.GRASS, "grass"),
        (Tile.WALL, "wall"),
        (Tile.WATER, "water"),
        (Tile.GOAL, "goal"),
    ):
        legend.append(TILE_GLYPHS[tile], style=TILE_STYLES[tile])
        legend.append(f" {name}  ")
    legend.append(AGENT_GLYPH, style=AGENT_STYLE)
    legend.append(" you")
    return legend
