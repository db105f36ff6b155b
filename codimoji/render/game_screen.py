"""Textual game screen: code editor, map, console and run controls."""

from __future__ import annotations

import random

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import RichLog, Static, TextArea

from codimoji.db.map_library import MapLibrary
from codimoji.render.console_view import render_output_line
from codimoji.render.textual_app import CodimojiApp
from codimoji.render.world_map import render_legend, render_world_lines
from codimoji.sim.config import SPEED_STEP
from codimoji.sim.contracts import OutputKind, OutputLine
from codimoji.sim.scheduler import Scheduler
from codimoji.sim.session import GameSession

EDITOR_WIDTH = 40

SAMPLE_PROGRAM = """x = 2
print('Hello')
move_right(x)
move_down()
"""


class RunOutput(Message):
    def __init__(self, line: OutputLine) -> None:
        super().__init__()
        self.line = line


class LineHighlighted(Message):
    def __init__(self, line_number: int | None) -> None:
        super().__init__()
        self.line_number = line_number


class MapChanged(Message):
    """The agent moved or the map was replaced."""


class RunStateChanged(Message):
    def __init__(self, running: bool) -> None:
        super().__init__()
        self.running = running


class ScreenObserver:
    """Post scheduler notifications to the screen as Textual messages.

    `post_message` is thread-safe and never blocks, so the worker thread can
    keep going while the UI thread joins it during a reset.
    """

    def __init__(self, screen: Screen) -> None:
        self._screen = screen

    def on_output(self, line: OutputLine) -> None:
        self._screen.post_message(RunOutput(line))

    def on_highlight(self, line_number: int | None) -> None:
        self._screen.post_message(LineHighlighted(line_number))

    def on_redraw(self) -> None:
        self._screen.post_message(MapChanged())

    def on_started(self) -> None:
        self._screen.post_message(RunStateChanged(True))

    def on_ended(self) -> None:
        self._screen.post_message(RunStateChanged(False))


class GameScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #right-pane {
        layout: vertical;
    }
    #world-map {
        height: auto;
    }
    #console {
        height: 1fr;
        border: round $primary;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("f5", "run", "Run"),
        ("f6", "stop", "Stop"),
        ("f7", "restart", "Restart"),
        ("f8", "new_map", "New map"),
        ("f4", "next_saved_map", "Saved maps"),
        ("f2", "slower", "Slower"),
        ("f3", "faster", "Faster"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        session: GameSession,
        *,
        library: MapLibrary,
        source: str = "",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.session = session
        self.library = library
        self.scheduler = Scheduler(session, ScreenObserver(self), library=library)
        self._source = source or SAMPLE_PROGRAM
        self._rng = rng or random.Random()
        self._running = False
        self._highlighted: int | None = None
        self._map_index = -1
        self._editor: TextArea | None = None
        self._map_view: Static | None = None
        self._console: RichLog | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            with Horizontal(id="main"):
                yield TextArea(self._source, id="code-editor")
                with Vertical(id="right-pane"):
                    yield Static(id="world-map")
                    yield RichLog(id="console", wrap=True, markup=False)
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._editor = self.query_one("#code-editor", TextArea)
        self._map_view = self.query_one("#world-map", Static)
        self._console = self.query_one("#console", RichLog)
        self._status_bar = self.query_one("#status-bar", Static)
        self._editor.styles.width = EDITOR_WIDTH
        self._editor.focus()
        self.refresh_map()
        self._refresh_status()

    def on_unmount(self) -> None:
        self.scheduler.stop()

    def on_run_output(self, message: RunOutput) -> None:
        self.write_output(message.line)

    def on_line_highlighted(self, message: LineHighlighted) -> None:
        self.highlight_line(message.line_number)

    def on_map_changed(self, message: MapChanged) -> None:
        self.refresh_map()

    def on_run_state_changed(self, message: RunStateChanged) -> None:
        self.set_running(message.running)

    def write_output(self, line: OutputLine) -> None:
        if self._console:
            self._console.write(render_output_line(line))

    def highlight_line(self, line_number: int | None) -> None:
        self._highlighted = line_number
        if self._editor:
            if line_number is None:
                self._editor.move_cursor(self._editor.cursor_location)
            elif line_number < self._editor.document.line_count:
                self._editor.select_line(line_number)
        self._refresh_status()

    def refresh_map(self) -> None:
        if self._map_view:
            lines = render_world_lines(self.session.world)
            self._map_view.update(
                Panel(Group(*lines, Text(), render_legend()), title="World")
            )

    def set_running(self, running: bool) -> None:
        self._running = running
        if self._editor:
            self._editor.read_only = running
        self._refresh_status()

    def action_run(self) -> None:
        if self._editor is None:
            return
        self.scheduler.run_async(self._editor.text)

    def action_stop(self) -> None:
        self.scheduler.stop()

    def action_restart(self) -> None:
        self.scheduler.reset_position()
        self._clear_console()

    def action_new_map(self) -> None:
        try:
            self.scheduler.full_reset(rng=self._rng)
        except ValueError as exc:
            self._report_library_error(exc)
            return
        self._clear_console()

    def action_next_saved_map(self) -> None:
        try:
            names = self.library.list_maps()
            if not names:
                self.write_output(OutputLine(text="No saved maps.", kind=OutputKind.NORMAL))
                return
            self._map_index = (self._map_index + 1) % len(names)
            name = names[self._map_index]
            grid = self.library.load_map(name)
        except ValueError as exc:
            self._report_library_error(exc)
            return
        self.scheduler.full_reset(grid)
        self.write_output(OutputLine(text=f"Loaded map {name}.", kind=OutputKind.NORMAL))

    def action_slower(self) -> None:
        self.session.set_game_speed(self.session.game_speed + SPEED_STEP)
        self._refresh_status()

    def action_faster(self) -> None:
        self.session.set_game_speed(self.session.game_speed - SPEED_STEP)
        self._refresh_status()

    def action_quit(self) -> None:
        self.scheduler.stop()
        self.app.exit()

    def _report_library_error(self, exc: ValueError) -> None:
        self.write_output(
            OutputLine(text=f"Map library error: {exc}", kind=OutputKind.ERROR)
        )

    def _clear_console(self) -> None:
        if self._console:
            self._console.clear()

    def _refresh_status(self) -> None:
        if self._status_bar:
            self._status_bar.update(Panel(Text(self._status_text()), padding=(0, 1)))

    def _status_text(self) -> str:
        label = "running" if self._running else "idle"
        line = "-" if self._highlighted is None else str(self._highlighted + 1)
        return (
            "F5=run | F6=stop | F7=restart | F8=new map | F4=saved maps | "
            f"F2/F3=speed {self.session.game_speed:.2f}s | line {line} | "
            f"user={self.library.username} | status={label}"
        )


def run_game(
    session: GameSession,
    *,
    library: MapLibrary,
    source: str = "",
    rng: random.Random | None = None,
) -> None:
    app = CodimojiApp(
        GameScreen(session, library=library, source=source, rng=rng),
        title="Codimoji",
    )
    app.run()
