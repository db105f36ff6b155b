from pathlib import Path

from codimoji.db.map_library import MapLibrary
from codimoji.render.map_editor import EditorState, move_cursor, paint, save
from codimoji.sim.contracts import Tile, count_tiles


def test_paint_goal_keeps_a_single_goal() -> None:
    state = EditorState(name="course", brush=Tile.GOAL)

    paint(state, (4, 4))
    paint(state, (6, 2))

    assert count_tiles(state.grid, Tile.GOAL) == 1
    assert state.grid[2][6] == Tile.GOAL
    assert state.grid[4][4] == Tile.GRASS


def test_goal_cannot_cover_the_start() -> None:
    state = EditorState(name="course", brush=Tile.GOAL)

    paint(state)

    assert count_tiles(state.grid, Tile.GOAL) == 0
    assert "start" in state.last_message


def test_cursor_stays_on_the_grid() -> None:
    state = EditorState(name="course")
    move_cursor(state, -1, -1)
    assert state.cursor == (0, 0)
    move_cursor(state, 50, 3)
    assert state.cursor == (11, 3)


def test_save_requires_a_goal(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    state = EditorState(name="course")
    paint(state, (1, 0))

    assert not save(state, library)
    assert library.list_maps() == []

    state.brush = Tile.GOAL
    paint(state, (5, 5))
    assert save(state, library)
    assert library.load_map("course")[0][1] == Tile.WALL
