from rich.console import Console

from codimoji.render.console_view import render_console, render_session
from codimoji.render.world_map import render_grid_lines
from codimoji.sim.contracts import OutputKind, OutputLine, Tile, empty_grid
from codimoji.sim.session import new_session
from codimoji.sim.world_state import Position


def test_grid_lines_show_tiles_and_agent() -> None:
    grid = empty_grid()
    grid[0][1] = Tile.WALL
    grid[0][2] = Tile.WATER
    grid[0][3] = Tile.GOAL

    lines = render_grid_lines(grid, agent=Position(0, 0))

    assert len(lines) == 12
    assert lines[0].plain.startswith("@ # ~ G .")
    assert sum(line.plain.count("@") for line in lines) == 1


def test_dead_agent_glyph() -> None:
    lines = render_grid_lines(empty_grid(), agent=Position(2, 1), dead=True)
    assert lines[1].plain.split(" ")[2] == "X"


def test_session_summary_renders_console_and_agent() -> None:
    grid = empty_grid()
    grid[5][5] = Tile.GOAL
    session = new_session(grid)
    session.variables = {"x": 3}
    lines = [
        OutputLine(text="Hello", kind=OutputKind.INFO),
        OutputLine(text="Status: Hit a wall! Character died.", kind=OutputKind.ERROR),
    ]

    console = Console(width=120, record=True)
    console.print(render_session(session, lines))
    output = console.export_text()

    assert "World" in output
    assert "Console" in output
    assert "Hello" in output
    assert "Hit a wall!" in output
    assert "x=3" in output
    assert "alive" in output


def test_empty_console_placeholder() -> None:
    console = Console(width=40, record=True)
    console.print(render_console([]))
    assert "No output yet." in console.export_text()
