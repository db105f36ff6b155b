"""Explicit game session: world, variables, run state and pacing."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from codimoji.sim.config import DEFAULT_GAME_SPEED, clamp_game_speed
from codimoji.sim.contracts import Grid
from codimoji.sim.map_gen import generate_map
from codimoji.sim.world_state import WorldState

if TYPE_CHECKING:
    from codimoji.db.map_library import MapLibrary


class ExecutionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"


@dataclass
class GameSession:
    world: WorldState
    variables: dict[str, int] = field(default_factory=dict)
    state: ExecutionState = ExecutionState.IDLE
    game_speed: float = DEFAULT_GAME_SPEED
    stop_event: threading.Event = field(default_factory=threading.Event)

    @property
    def stop_requested(self) -> bool:
        return self.stop_event.is_set()

    def set_game_speed(self, value: float) -> float:
        self.game_speed = clamp_game_speed(value)
        return self.game_speed


def new_session(
    grid: Grid | None = None,
    *,
    rng: random.Random | None = None,
    game_speed: float = DEFAULT_GAME_SPEED,
) -> GameSession:
    world = WorldState(grid=grid if grid is not None else generate_map(rng))
    return GameSession(world=world, game_speed=game_speed)


def reset_position(session: GameSession) -> None:
    """Forget variables and run state, put the agent back at the start."""
    session.variables = {}
    session.state = ExecutionState.IDLE
    session.stop_event.clear()
    session.world.reset_agent()


def full_reset(
    session: GameSession,
    grid: Grid | None = None,
    *,
    library: MapLibrary | None = None,
    rng: random.Random | None = None,
) -> None:
    """Reset the position and swap the map.

    Without an explicit grid the user's first saved map wins, then a freshly
    generated one.
    """
    if grid is None and library is not None:
        grid = library.first_map()
    reset_position(session)
    session.world.load_map(grid if grid is not None else generate_map(rng))
