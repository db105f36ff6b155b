"""Per-user library of saved maps (JSON)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from codimoji.logger import setup_logger
from codimoji.sim.contracts import Grid, MapDocument, copy_grid

logger = setup_logger(__name__)

SCHEMA_VERSION = 1
DEFAULT_USER = "default"


@dataclass(frozen=True)
class MapLibrary:
    base_dir: Path = Path("maps")
    username: str = DEFAULT_USER

    @property
    def path(self) -> Path:
        return self.base_dir / f"maps_{self.username}.json"

    def list_maps(self) -> list[str]:
        return [document.name for document in self.load_all()]

    def load_all(self) -> list[MapDocument]:
        record = _read_record(self.path)
        return [
            MapDocument(name=name, grid=grid)
            for name, grid in record.get("maps", {}).items()
        ]

    def load_map(self, name: str) -> Grid:
        for document in self.load_all():
            if document.name == name:
                return copy_grid(document.grid)
        raise KeyError(f"No saved map named {name!r} for user {self.username!r}.")

    def first_map(self) -> Grid | None:
        documents = self.load_all()
        if not documents:
            return None
        return copy_grid(documents[0].grid)

    def save_map(self, name: str, grid: Grid) -> MapDocument:
        document = MapDocument(name=name, grid=grid)
        record = _read_record(self.path)
        maps = record.setdefault("maps", {})
        maps[document.name] = [[int(tile) for tile in row] for row in document.grid]
        _write_record(self.path, record)
        logger.info("Saved map %r to %s.", document.name, self.path)
        return document


def _read_record(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No map library at %s yet.", path)
        return {"schema_version": SCHEMA_VERSION, "maps": {}}
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Map library {path} is not valid JSON.") from exc
    if not isinstance(record, dict):
        raise ValueError(f"Map library {path} must hold a JSON object.")
    return record


def _write_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    record["schema_version"] = SCHEMA_VERSION
    path.write_text(json.dumps(record, indent=2) + "\n", encoding="utf-8")
