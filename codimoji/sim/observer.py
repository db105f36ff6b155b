"""Callbacks the scheduler uses to talk to consoles, editors and map views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from codimoji.sim.contracts import OutputKind, OutputLine


class RunObserver(Protocol):
    def on_output(self, line: OutputLine) -> None: ...

    def on_highlight(self, line_number: int | None) -> None: ...

    def on_redraw(self) -> None: ...

    def on_started(self) -> None: ...

    def on_ended(self) -> None: ...


class NullObserver:
    def on_output(self, line: OutputLine) -> None:
        return None

    def on_highlight(self, line_number: int | None) -> None:
        return None

    def on_redraw(self) -> None:
        return None

    def on_started(self) -> None:
        return None

    def on_ended(self) -> None:
        return None


@dataclass
class RecordingObserver:
    """Keep every notification in order; handy for headless runs."""

    lines: list[OutputLine] = field(default_factory=list)
    highlights: list[int | None] = field(default_factory=list)
    redraws: int = 0
    started: int = 0
    ended: int = 0

    def on_output(self, line: OutputLine) -> None:
        self.lines.append(line)

    def on_highlight(self, line_number: int | None) -> None:
        self.highlights.append(line_number)

    def on_redraw(self) -> None:
        self.redraws += 1

    def on_started(self) -> None:
        self.started += 1

    def on_ended(self) -> None:
        self.ended += 1

    def texts(self, kind: OutputKind | None = None) -> list[str]:
        return [line.text for line in self.lines if kind is None or line.kind == kind]
