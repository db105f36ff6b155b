import json
import random
from pathlib import Path

import pytest
from pydantic import ValidationError

from codimoji.db.map_library import MapLibrary
from codimoji.sim.contracts import Tile, empty_grid
from codimoji.sim.map_gen import generate_map


def test_missing_library_is_empty(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    assert library.list_maps() == []
    assert library.first_map() is None


def test_save_and_load_by_name(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    first = generate_map(random.Random(1))
    second = generate_map(random.Random(2))

    library.save_map("first", first)
    library.save_map("second", second)

    assert library.path == tmp_path / "maps_ada.json"
    assert library.list_maps() == ["first", "second"]
    assert library.load_map("second") == second
    assert library.first_map() == first
    loaded = library.load_map("first")
    assert all(isinstance(tile, Tile) for row in loaded for tile in row)


def test_libraries_are_per_user(tmp_path: Path) -> None:
    MapLibrary(base_dir=tmp_path, username="ada").save_map("mine", empty_grid())
    assert MapLibrary(base_dir=tmp_path, username="bob").list_maps() == []


def test_missing_names_raise_key_error(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    library.save_map("kept", empty_grid())

    with pytest.raises(KeyError):
        library.load_map("gone")
    assert library.list_maps() == ["kept"]


def test_file_is_plain_json_of_tile_values(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    grid = empty_grid()
    grid[3][4] = Tile.GOAL
    library.save_map("one", grid)

    record = json.loads(library.path.read_text(encoding="utf-8"))
    assert record["schema_version"] == 1
    assert record["maps"]["one"][3][4] == 3


def test_malformed_maps_are_rejected(tmp_path: Path) -> None:
    library = MapLibrary(base_dir=tmp_path, username="ada")
    with pytest.raises(ValidationError):
        library.save_map("short", [[Tile.GRASS] * 12])

    library.path.write_text('{"maps": {"bad": [[9]]}}', encoding="utf-8")
    with pytest.raises(ValidationError):
        library.list_maps()

    library.path.write_text("not json", encoding="utf-8")
    with pytest.raises(ValueError):
        library.list_maps()
