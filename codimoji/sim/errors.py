"""Exceptions raised by the interpreter and the map generator."""

from __future__ import annotations


class InterpreterError(Exception):
    """A statement could not be executed; ends the current run."""


class InvalidAssignment(InterpreterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid value for {name}")
        self.name = name


class InvalidPrint(InterpreterError):
    def __init__(self) -> None:
        super().__init__("Invalid print statement")


class MapGenerationError(ValueError):
    """Requested special tiles do not fit on the grid."""
