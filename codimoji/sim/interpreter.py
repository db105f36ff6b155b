"""Statement effects: variable binding, printing and stepwise movement."""

from __future__ import annotations

from typing import Callable

from codimoji.sim.contracts import OutputKind, OutputLine, Tile
from codimoji.sim.errors import InvalidAssignment
from codimoji.sim.observer import RunObserver
from codimoji.sim.parser import Assign, Move, Noop, Print, Statement, is_uint
from codimoji.sim.session import GameSession

OUT_OF_BOUNDS_MESSAGE = "Status: Out of bounds! Character died."
WALL_MESSAGE = "Status: Hit a wall! Character died."
WATER_MESSAGE = "Status: Fell in water! Character died."
VICTORY_MESSAGE = "Status: Reached the goal! Victory!"


class Interpreter:
    """Apply one parsed statement at a time to a session.

    `wait` is supplied by the scheduler: it sleeps for one tick and returns
    False when the run was asked to stop meanwhile.
    """

    def __init__(
        self,
        session: GameSession,
        observer: RunObserver,
        *,
        wait: Callable[[], bool],
    ) -> None:
        self.session = session
        self.observer = observer
        self._wait = wait

    def execute(self, statement: Statement) -> bool:
        """Run a statement; False means the run must end now."""
        if isinstance(statement, Assign):
            self._assign(statement)
            return True
        if isinstance(statement, Print):
            self._print(statement)
            return True
        if isinstance(statement, Move):
            return self._move(statement)
        if isinstance(statement, Noop):
            return True
        raise TypeError(f"Unknown statement: {statement!r}")

    def resolve_steps(self, argument: str | None) -> int:
        steps = 1
        if argument is not None:
            if argument in self.session.variables:
                steps = self.session.variables[argument]
            elif is_uint(argument):
                steps = int(argument)
        if steps <= 0:
            steps = 1
        return steps

    def _assign(self, statement: Assign) -> None:
        variables = self.session.variables
        if is_uint(statement.value):
            variables[statement.name] = int(statement.value)
        elif statement.value in variables:
            variables[statement.name] = variables[statement.value]
        else:
            raise InvalidAssignment(statement.name)

    def _print(self, statement: Print) -> None:
        text = statement.token
        if not statement.quoted and statement.token in self.session.variables:
            text = str(self.session.variables[statement.token])
        self._emit(text, OutputKind.INFO)

    def _move(self, statement: Move) -> bool:
        world = self.session.world
        steps = self.resolve_steps(statement.argument)
        dx, dy = statement.direction.delta

        for _ in range(steps):
            if self.session.stop_requested or world.agent.dead:
                return False
            candidate = world.agent.position.offset(dx, dy)

            if world.is_out_of_bounds(candidate):
                self._die(OUT_OF_BOUNDS_MESSAGE)
                return False
            if world.is_collision(candidate):
                tile = world.tile_at(candidate)
                self._die(WALL_MESSAGE if tile == Tile.WALL else WATER_MESSAGE)
                return False

            world.set_position(candidate)
            self.observer.on_redraw()
            if world.is_goal(candidate):
                self._emit(VICTORY_MESSAGE, OutputKind.SUCCESS)
                return False

            if not self._wait():
                return False

        if steps > 1:
            self._emit(f"Completed {steps} step movement.", OutputKind.INFO)
        return True

    def _die(self, message: str) -> None:
        self.session.world.agent.dead = True
        self._emit(message, OutputKind.ERROR)
        self.observer.on_redraw()

    def _emit(self, text: str, kind: OutputKind) -> None:
        self.observer.on_output(OutputLine(text=text, kind=kind))
