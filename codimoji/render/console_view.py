"""Rich rendering for console output and run summaries."""

from __future__ import annotations

from typing import Iterable

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from codimoji.render.world_map import render_legend, render_world_lines
from codimoji.sim.contracts import OutputKind, OutputLine
from codimoji.sim.session import GameSession

OUTPUT_STYLES = {
    OutputKind.NORMAL: "white",
    OutputKind.INFO: "white",
    OutputKind.ERROR: "bold red",
    OutputKind.SUCCESS: "bold green",
}


def render_output_line(line: OutputLine) -> Text:
    return Text(line.text, style=OUTPUT_STYLES.get(line.kind, "white"))


def render_console(lines: Iterable[OutputLine], *, max_lines: int = 200) -> RenderableType:
    rendered = [render_output_line(line) for line in lines]
    if not rendered:
        return Text("No output yet.", style="grey50")
    return Group(*rendered[-max_lines:])


def render_session(session: GameSession, lines: Iterable[OutputLine]) -> RenderableType:
    world = Panel(
        Group(*render_world_lines(session.world), Text(), render_legend()),
        title="World",
    )
    right = Group(_render_agent(session), Panel(render_console(lines), title="Console"))
    return Columns([world, right])


def _render_agent(session: GameSession) -> RenderableType:
    agent = session.world.agent
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Position", f"{agent.position.x}, {agent.position.y}")
    table.add_row("Status", "dead" if agent.dead else "alive")
    table.add_row("Speed", f"{session.game_speed:.2f}s")
    variables = ", ".join(
        f"{name}={value}" for name, value in sorted(session.variables.items())
    )
    table.add_row("Variables", variables or "None")
    return Panel(table, title="Agent")
