"""Map editor for painting tiles and saving them to the map library."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Static

from codimoji.db.map_library import MapLibrary
from codimoji.render.textual_app import CodimojiApp
from codimoji.render.textual_widgets import GridClicked, GridWidget
from codimoji.render.world_map import TILE_GLYPHS, TILE_STYLES, render_grid_lines
from codimoji.sim.config import GRID_SIZE, ORIGIN
from codimoji.sim.contracts import Grid, Tile, copy_grid, count_tiles, empty_grid
from codimoji.sim.map_gen import generate_map

BRUSH_KEYS = {
    "1": Tile.GRASS,
    "2": Tile.WALL,
    "3": Tile.WATER,
    "4": Tile.GOAL,
}


@dataclass
class EditorState:
    name: str
    grid: Grid = field(default_factory=empty_grid)
    cursor: tuple[int, int] = ORIGIN
    brush: Tile = Tile.WALL
    last_message: str = ""


def paint(state: EditorState, cell: tuple[int, int] | None = None) -> None:
    """Paint the brush tile at `cell` (default: the cursor).

    A map keeps a single goal, and the goal never sits on the start tile.
    """
    x, y = cell or state.cursor
    if state.brush == Tile.GOAL:
        if (x, y) == ORIGIN:
            state.last_message = "The goal cannot be placed on the start tile."
            return
        for row in state.grid:
            for index, tile in enumerate(row):
                if tile == Tile.GOAL:
                    row[index] = Tile.GRASS
    state.grid[y][x] = state.brush
    state.last_message = f"Painted {state.brush.name.lower()} at {x}, {y}."


def move_cursor(state: EditorState, dx: int, dy: int) -> None:
    x, y = state.cursor
    size = len(state.grid)
    state.cursor = (max(0, min(size - 1, x + dx)), max(0, min(size - 1, y + dy)))


def save(state: EditorState, library: MapLibrary) -> bool:
    if count_tiles(state.grid, Tile.GOAL) != 1:
        state.last_message = "Place exactly one goal before saving."
        return False
    library.save_map(state.name, copy_grid(state.grid))
    state.last_message = f"Saved {state.name}."
    return True


class MapEditorScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #grid-panel {
        border: round $primary;
        width: auto;
        height: auto;
        padding: 0 1;
    }
    #editor-panel {
        width: 36;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("up", "cursor(0, -1)", "Up"),
        ("down", "cursor(0, 1)", "Down"),
        ("left", "cursor(-1, 0)", "Left"),
        ("right", "cursor(1, 0)", "Right"),
        ("space", "paint", "Paint"),
        ("1", "brush('1')", "Grass"),
        ("2", "brush('2')", "Wall"),
        ("3", "brush('3')", "Water"),
        ("4", "brush('4')", "Goal"),
        ("n", "randomize", "Random"),
        ("c", "clear", "Clear"),
        ("s", "save", "Save"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, state: EditorState, *, library: MapLibrary) -> None:
        super().__init__()
        self.state = state
        self.library = library
        self._grid: GridWidget | None = None
        self._panel: Static | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            with Horizontal(id="main"):
                with Vertical(id="grid-panel"):
                    yield GridWidget(
                        self._render_lines,
                        grid_size=len(self.state.grid),
                        emit_clicks=True,
                        id="grid",
                    )
                yield Static(id="editor-panel")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._grid = self.query_one("#grid", GridWidget)
        self._panel = self.query_one("#editor-panel", Static)
        self._status_bar = self.query_one("#status-bar", Static)
        self._refresh_ui()

    def on_grid_clicked(self, message: GridClicked) -> None:
        self.state.cursor = message.cell
        paint(self.state, message.cell)
        self._refresh_ui()

    def action_cursor(self, dx: int, dy: int) -> None:
        move_cursor(self.state, dx, dy)
        self._refresh_ui()

    def action_paint(self) -> None:
        paint(self.state)
        self._refresh_ui()

    def action_brush(self, key: str) -> None:
        self.state.brush = BRUSH_KEYS[key]
        self.state.last_message = f"Brush: {self.state.brush.name.lower()}."
        self._refresh_ui()

    def action_randomize(self) -> None:
        self.state.grid = generate_map(random.Random(), grid_size=len(self.state.grid))
        self.state.last_message = "Generated a random layout."
        self._refresh_ui()

    def action_clear(self) -> None:
        self.state.grid = empty_grid(len(self.state.grid))
        self.state.last_message = "Cleared."
        self._refresh_ui()

    def action_save(self) -> None:
        save(self.state, self.library)
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _render_lines(self) -> list[Text]:
        return render_grid_lines(self.state.grid, cursor=self.state.cursor)

    def _refresh_ui(self) -> None:
        if self._grid:
            self._grid.refresh()
        if self._panel:
            self._panel.update(Panel(_render_editor_table(self.state), title="Editor"))
        if self._status_bar:
            self._status_bar.update(
                Panel(
                    Text(
                        "arrows=move | space/click=paint | 1-4=brush | n=random | "
                        "c=clear | s=save | q=quit",
                        style="bold",
                    ),
                    padding=(0, 1),
                )
            )


def run_map_editor(name: str, *, library: MapLibrary) -> None:
    try:
        grid = library.load_map(name)
    except KeyError:
        grid = empty_grid(GRID_SIZE)
    state = EditorState(name=name, grid=grid)
    app = CodimojiApp(MapEditorScreen(state, library=library), title="Codimoji Editor")
    app.run()


def _render_editor_table(state: EditorState) -> Table:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Map", state.name)
    table.add_row("Cursor", f"{state.cursor[0]}, {state.cursor[1]}")
    brush = Text()
    brush.append(TILE_GLYPHS[state.brush], style=TILE_STYLES[state.brush])
    brush.append(f" {state.brush.name.lower()}")
    table.add_row("Brush", brush)
    table.add_row("Walls", str(count_tiles(state.grid, Tile.WALL)))
    table.add_row("Water", str(count_tiles(state.grid, Tile.WATER)))
    table.add_row("Goals", str(count_tiles(state.grid, Tile.GOAL)))
    if state.last_message:
        table.add_row("Note", state.last_message)
    return table
