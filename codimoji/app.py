"""Application entry points for running programs headless or in the TUI."""

from __future__ import annotations

import os
import random
from pathlib import Path

from codimoji.db.map_library import DEFAULT_USER, MapLibrary
from codimoji.logger import setup_logger
from codimoji.sim.config import DEFAULT_GAME_SPEED, clamp_game_speed
from codimoji.sim.contracts import Grid
from codimoji.sim.map_gen import generate_map
from codimoji.sim.observer import RecordingObserver, RunObserver
from codimoji.sim.scheduler import Scheduler
from codimoji.sim.session import GameSession, new_session

DEFAULT_MAP_DIR = Path("maps")

logger = setup_logger(__name__)


def resolve_library(username: str | None = None, map_dir: Path | None = None) -> MapLibrary:
    user = username or os.getenv("CODIMOJI_USER") or DEFAULT_USER
    base_dir = map_dir or Path(os.getenv("CODIMOJI_MAP_DIR") or DEFAULT_MAP_DIR)
    return MapLibrary(base_dir=base_dir, username=user)


def resolve_game_speed(speed: float | None = None) -> float:
    if speed is not None:
        return clamp_game_speed(speed)
    raw = os.getenv("CODIMOJI_SPEED")
    if raw:
        try:
            return clamp_game_speed(float(raw))
        except ValueError:
            logger.warning("Ignoring invalid CODIMOJI_SPEED=%r.", raw)
    return DEFAULT_GAME_SPEED


def choose_map(
    library: MapLibrary,
    *,
    name: str | None = None,
    rng: random.Random | None = None,
) -> Grid:
    """Pick a named map, else the first saved one, else a fresh random map."""
    if name:
        return library.load_map(name)
    saved = library.first_map()
    if saved is not None:
        return saved
    return generate_map(rng)


def run_program(
    source: str,
    *,
    library: MapLibrary | None = None,
    map_name: str | None = None,
    game_speed: float | None = None,
    seed: int | None = None,
    observer: RunObserver | None = None,
) -> tuple[GameSession, RecordingObserver]:
    library = library or resolve_library()
    rng = random.Random(seed) if seed is not None else None
    grid = choose_map(library, name=map_name, rng=rng)
    session = new_session(grid, game_speed=resolve_game_speed(game_speed))
    recorder = RecordingObserver()
    scheduler = Scheduler(
        session, _FanOutObserver([recorder, observer]), library=library
    )
    scheduler.run(source)
    return session, recorder


def play(
    source: str = "",
    *,
    library: MapLibrary | None = None,
    map_name: str | None = None,
    game_speed: float | None = None,
    seed: int | None = None,
) -> None:
    from codimoji.render.game_screen import run_game

    library = library or resolve_library()
    rng = random.Random(seed) if seed is not None else random.Random()
    grid = choose_map(library, name=map_name, rng=rng)
    session = new_session(grid, game_speed=resolve_game_speed(game_speed))
    run_game(session, library=library, source=source, rng=rng)


class _FanOutObserver:
    def __init__(self, observers: list[RunObserver | None]) -> None:
        self._observers = [observer for observer in observers if observer is not None]

    def on_output(self, line) -> None:
        for observer in self._observers:
            observer.on_output(line)

    def on_highlight(self, line_number: int | None) -> None:
        for observer in self._observers:
            observer.on_highlight(line_number)

    def on_redraw(self) -> None:
        for observer in self._observers:
            observer.on_redraw()

    def on_started(self) -> None:
        for observer in self._observers:
            observer.on_started()

    def on_ended(self) -> None:
        for observer in self._observers:
            observer.on_ended()
