"""Line classification for the movement language."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from codimoji.sim.errors import InvalidPrint

_QUOTED_PRINT = re.compile(r"""print\(['"]([^'"]+)['"]\)""")
_IDENT_PRINT = re.compile(r"print\((\w+)\)")
_MOVE = re.compile(r"^(move_right|move_left|move_down|move_up)\s*\(\s*(\w+)?\s*\)$")
_UINT = re.compile(r"^\d+$")


class Direction(str, Enum):
    RIGHT = "move_right"
    LEFT = "move_left"
    UP = "move_up"
    DOWN = "move_down"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


@dataclass(frozen=True)
class SourceLine:
    index: int
    line_number: int
    text: str


@dataclass(frozen=True)
class Assign:
    name: str
    value: str


@dataclass(frozen=True)
class Print:
    token: str
    quoted: bool


@dataclass(frozen=True)
class Move:
    direction: Direction
    argument: str | None = None


@dataclass(frozen=True)
class Noop:
    text: str


Statement = Assign | Print | Move | Noop


def parse_program(source: str) -> list[SourceLine]:
    """Split source into trimmed, non-blank lines.

    `index` counts statements; `line_number` is the zero-based position in the
    original text, used to highlight the right editor row.
    """
    lines: list[SourceLine] = []
    for line_number, raw in enumerate(source.splitlines()):
        text = raw.strip()
        if not text:
            continue
        lines.append(SourceLine(index=len(lines), line_number=line_number, text=text))
    return lines


def parse_statement(text: str) -> Statement:
    if "=" in text and "==" not in text:
        name, _, value = text.partition("=")
        return Assign(name=name.strip(), value=value.strip())

    if text.startswith("print("):
        match = _QUOTED_PRINT.search(text)
        if match:
            return Print(token=match.group(1), quoted=True)
        match = _IDENT_PRINT.search(text)
        if match:
            return Print(token=match.group(1), quoted=False)
        raise InvalidPrint()

    match = _MOVE.match(text)
    if match:
        return Move(direction=Direction(match.group(1)), argument=match.group(2))

    return Noop(text=text)


def is_uint(token: str) -> bool:
    return bool(_UINT.match(token))
