"""Paced, cancellable execution of a program against a game session."""

from __future__ import annotations

import random
import threading
from typing import TYPE_CHECKING

from codimoji.logger import setup_logger
from codimoji.sim.contracts import Grid, OutputKind, OutputLine
from codimoji.sim.errors import InterpreterError
from codimoji.sim.interpreter import Interpreter
from codimoji.sim.observer import NullObserver, RunObserver
from codimoji.sim.parser import SourceLine, parse_program, parse_statement
from codimoji.sim.session import (
    ExecutionState,
    GameSession,
    full_reset,
    reset_position,
)

if TYPE_CHECKING:
    from codimoji.db.map_library import MapLibrary

logger = setup_logger(__name__)


class Scheduler:
    """Drive one run at a time, one statement per tick.

    `run` blocks the calling thread; `run_async` executes on a daemon worker
    so a UI can keep drawing. Either way a second start while a run is active
    is ignored. `stop` is cooperative: the run notices it before the next
    statement or movement step. Resets wait for the active run to finish,
    whichever thread is driving it.
    """

    def __init__(
        self,
        session: GameSession,
        observer: RunObserver | None = None,
        *,
        library: MapLibrary | None = None,
    ) -> None:
        self.session = session
        self.observer = observer or NullObserver()
        self.library = library
        self._lock = threading.Lock()
        self._idle = threading.Event()
        self._idle.set()
        self._runner: threading.Thread | None = None

    @property
    def state(self) -> ExecutionState:
        return self.session.state

    def run(self, source: str) -> bool:
        lines = parse_program(source)
        if not lines or not self._claim(threading.current_thread()):
            return False
        self._execute(lines)
        return True

    def run_async(self, source: str) -> bool:
        lines = parse_program(source)
        if not lines:
            return False
        worker = threading.Thread(
            target=self._execute, args=(lines,), name="codimoji-run", daemon=True
        )
        if not self._claim(worker):
            return False
        worker.start()
        return True

    def stop(self) -> None:
        with self._lock:
            if self.session.state != ExecutionState.RUNNING:
                return
            self.session.state = ExecutionState.STOPPING
            self.session.stop_event.set()
        logger.info("Stop requested.")

    def join(self, timeout: float | None = None) -> bool:
        """Wait until no run is active. Returns False on timeout.

        Called from the thread driving the run itself, this returns at once.
        """
        if self._runner is threading.current_thread():
            return self._idle.is_set()
        return self._idle.wait(timeout)

    def reset_position(self) -> None:
        self.stop()
        self.join()
        reset_position(self.session)
        self.observer.on_highlight(None)
        self.observer.on_redraw()

    def full_reset(self, grid: Grid | None = None, *, rng: random.Random | None = None) -> None:
        self.stop()
        self.join()
        full_reset(self.session, grid, library=self.library, rng=rng)
        self.observer.on_highlight(None)
        self.observer.on_redraw()

    def load_map(self, grid: Grid) -> None:
        self.session.world.load_map(grid)
        self.observer.on_redraw()

    def _claim(self, runner: threading.Thread) -> bool:
        with self._lock:
            if self.session.state != ExecutionState.IDLE or not self._idle.is_set():
                logger.debug("Run ignored; a program is already running.")
                return False
            self.session.state = ExecutionState.RUNNING
            self.session.stop_event.clear()
            self.session.variables = {}
            self._runner = runner
            self._idle.clear()
            return True

    def _execute(self, lines: list[SourceLine]) -> None:
        interpreter = Interpreter(self.session, self.observer, wait=self._wait_tick)
        logger.info("Run started with %d statements.", len(lines))
        try:
            self.observer.on_started()
            self._dispatch(interpreter, lines)
        finally:
            self.observer.on_highlight(None)
            with self._lock:
                self.session.state = ExecutionState.IDLE
            logger.info("Run ended.")
            try:
                self.observer.on_ended()
            finally:
                self._idle.set()

    def _dispatch(self, interpreter: Interpreter, lines: list[SourceLine]) -> None:
        last = len(lines) - 1
        for source_line in lines:
            if self.session.stop_requested:
                return
            self.observer.on_highlight(source_line.line_number)
            try:
                statement = parse_statement(source_line.text)
                keep_going = interpreter.execute(statement)
            except InterpreterError as exc:
                logger.info("Line %d failed: %s", source_line.line_number + 1, exc)
                self.observer.on_output(
                    OutputLine(text=f"Error: {exc}", kind=OutputKind.ERROR)
                )
                return
            if not keep_going:
                return
            if source_line.index < last and not self._wait_tick():
                return

    def _wait_tick(self) -> bool:
        # Speed is read per tick so changes apply from the next one.
        self.session.stop_event.wait(self.session.game_speed)
        return not self.session.stop_requested
