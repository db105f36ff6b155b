"""Shared Textual widgets for grid rendering."""

from __future__ import annotations

from typing import Callable

from rich.console import Group, RenderableType
from rich.text import Text
from textual.events import Click
from textual.message import Message
from textual.widget import Widget

# Each tile is drawn as a glyph followed by a spacer column.
CELL_WIDTH = 2


class GridClicked(Message):
    """Message emitted when a click resolves to grid coordinates."""

    def __init__(self, *, cell: tuple[int, int]) -> None:
        super().__init__()
        self.cell = cell


class GridWidget(Widget):
    """Render grid lines and optionally emit click events."""

    DEFAULT_CSS = """
    GridWidget {
        height: auto;
        width: auto;
    }
    """

    def __init__(
        self,
        render_lines: Callable[[], list[Text]],
        *,
        grid_size: int,
        emit_clicks: bool = False,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._render_lines = render_lines
        self._grid_size = grid_size
        self._emit_clicks = emit_clicks

    def render(self) -> RenderableType:
        return Group(*self._render_lines())

    def on_click(self, event: Click) -> None:
        if not self._emit_clicks:
            return
        offset = event.get_content_offset(self)
        if offset is None:
            return
        x, y = offset
        cell_x = x // CELL_WIDTH
        if not (0 <= cell_x < self._grid_size and 0 <= y < self._grid_size):
            return
        self.post_message(GridClicked(cell=(cell_x, y)))
