"""Module entry point for `python -m codimoji`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from codimoji.app import play, resolve_library, run_program
from codimoji.render.console_view import render_output_line, render_session
from codimoji.render.map_editor import run_map_editor


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run Codimoji movement programs.")
    parser.add_argument(
        "program",
        type=Path,
        nargs="?",
        default=None,
        help="Program file to run (headless unless --play is given).",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Open the interactive game screen.",
    )
    parser.add_argument(
        "--edit-map",
        default=None,
        metavar="NAME",
        help="Open the map editor for a saved map (created if missing).",
    )
    parser.add_argument(
        "--list-maps",
        action="store_true",
        help="List saved maps for the user.",
    )
    parser.add_argument(
        "--map",
        default=None,
        help="Saved map to play on (defaults to the first saved map, else random).",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=None,
        help="Seconds per tick. Defaults to CODIMOJI_SPEED or 0.5.",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Map library owner. Defaults to CODIMOJI_USER or 'default'.",
    )
    parser.add_argument(
        "--map-dir",
        type=Path,
        default=None,
        help="Directory holding map libraries. Defaults to CODIMOJI_MAP_DIR or ./maps.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random map generation.",
    )
    args = parser.parse_args(argv)
    try:
        _dispatch(args)
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc
    except ValueError as exc:
        # Corrupt library files and invalid saved tiles land here.
        raise SystemExit(f"Error: {exc}") from exc


def _dispatch(args: argparse.Namespace) -> None:
    library = resolve_library(args.user, args.map_dir)

    if args.list_maps:
        console = Console()
        names = library.list_maps()
        if not names:
            console.print(f"No saved maps for {library.username}.")
        for name in names:
            console.print(name)
        return

    if args.edit_map:
        run_map_editor(args.edit_map, library=library)
        return

    source = _read_program(args.program) if args.program else ""

    if args.play:
        play(
            source,
            library=library,
            map_name=args.map,
            game_speed=args.speed,
            seed=args.seed,
        )
        return

    if not source:
        raise SystemExit("No program given. Pass a program file or use --play.")

    console = Console()
    session, recorder = run_program(
        source,
        library=library,
        map_name=args.map,
        game_speed=args.speed,
        seed=args.seed,
        observer=_ConsoleObserver(console),
    )
    console.print(render_session(session, recorder.lines))


class _ConsoleObserver:
    def __init__(self, console: Console) -> None:
        self._console = console

    def on_output(self, line) -> None:
        self._console.print(render_output_line(line))

    def on_highlight(self, line_number: int | None) -> None:
        return None

    def on_redraw(self) -> None:
        return None

    def on_started(self) -> None:
        return None

    def on_ended(self) -> None:
        return None


def _read_program(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SystemExit(f"Program file not found: {path}") from exc


if __name__ == "__main__":
    main()
