# pathgrid/app/maps.py
"""
Map files: bounds, start, goal and an optional initial obstacle layout.

{
  "width": 10, "height": 8,
  "start": [0, 0], "goal": [9, 7],
  "cells":   [[0, 0, 1, ...], ...],   # optional, [row][col], 1 = blocked
  "blocked": [[3, 4], [3, 5]]         # optional, list of [x, y]
}
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pathgrid.core.types import GridMap

log = logging.getLogger(__name__)

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
DEFAULT_MAP = MAP_DIR / "01_open.json"
MAP_ENV = "PATHGRID_MAP"


class MapError(ValueError):
    pass


def _pair(data: Dict[str, Any], key: str) -> Tuple[int, int]:
    try:
        x, y = data[key]
        return int(x), int(y)
    except KeyError:
        raise MapError(f"missing '{key}'") from None
    except (TypeError, ValueError):
        raise MapError(f"'{key}' must be an [x, y] pair, got {data[key]!r}") from None


def _size(data: Dict[str, Any], key: str) -> int:
    try:
        return int(data[key])
    except KeyError:
        raise MapError(f"missing '{key}'") from None
    except (TypeError, ValueError):
        raise MapError(f"'{key}' must be an integer, got {data[key]!r}") from None


def grid_from_dict(data: Dict[str, Any]) -> GridMap:
    if not isinstance(data, dict):
        raise MapError(f"map must be a JSON object, got {type(data).__name__}")
    width = _size(data, "width")
    height = _size(data, "height")
    start = _pair(data, "start")
    goal = _pair(data, "goal")

    blocked: List[Tuple[int, int]] = []
    cells = data.get("cells")
    if cells is not None:
        if not isinstance(cells, list) or not all(isinstance(r, list) for r in cells):
            raise MapError("cells must be a list of rows")
        if len(cells) != height or not all(len(r) == width for r in cells):
            raise MapError("cells size mismatch")
        for y, row in enumerate(cells):
            blocked.extend((x, y) for x, v in enumerate(row) if v == 1)
    extra = data.get("blocked", [])
    if not isinstance(extra, list):
        raise MapError("blocked must be a list of [x, y] cells")
    for c in extra:
        try:
            x, y = c
            blocked.append((int(x), int(y)))
        except (TypeError, ValueError):
            raise MapError(f"bad blocked cell {c!r}") from None

    try:
        return GridMap(width, height, start, goal, blocked)
    except ValueError as ex:
        raise MapError(str(ex)) from ex


def load_map(path) -> GridMap:
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as ex:
        raise MapError(f"cannot read map {path}: {ex}") from ex
    grid = grid_from_dict(data)
    log.debug("loaded %s from %s", grid, path)
    return grid


def resolve_map_path(arg=None) -> Path:
    """--map argument, else $PATHGRID_MAP, else the bundled open map."""
    if arg:
        return Path(arg)
    env = os.getenv(MAP_ENV)
    if env:
        return Path(env)
    return DEFAULT_MAP
