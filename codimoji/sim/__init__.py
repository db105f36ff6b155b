"""Grid world model and program interpreter."""

from codimoji.sim.contracts import Grid, MapDocument, OutputKind, OutputLine, Tile
from codimoji.sim.errors import (
    InterpreterError,
    InvalidAssignment,
    InvalidPrint,
    MapGenerationError,
)
from codimoji.sim.interpreter import Interpreter
from codimoji.sim.map_gen import generate_map
from codimoji.sim.observer import NullObserver, RecordingObserver, RunObserver
from codimoji.sim.parser import (
    Assign,
    Direction,
    Move,
    Noop,
    Print,
    Statement,
    parse_program,
    parse_statement,
)
from codimoji.sim.scheduler import Scheduler
from codimoji.sim.session import (
    ExecutionState,
    GameSession,
    full_reset,
    new_session,
    reset_position,
)
from codimoji.sim.world_state import AgentState, Position, WorldState

__all__ = [
    "AgentState",
    "Assign",
    "Direction",
    "ExecutionState",
    "GameSession",
    "Grid",
    "Interpreter",
    "InterpreterError",
    "InvalidAssignment",
    "InvalidPrint",
    "MapDocument",
    "MapGenerationError",
    "Move",
    "Noop",
    "NullObserver",
    "OutputKind",
    "OutputLine",
    "Position",
    "Print",
    "RecordingObserver",
    "RunObserver",
    "Scheduler",
    "Statement",
    "Tile",
    "WorldState",
    "full_reset",
    "generate_map",
    "new_session",
    "parse_program",
    "parse_statement",
    "reset_position",
]
