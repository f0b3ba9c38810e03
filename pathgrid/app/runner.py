#!/usr/bin/env python3
"""
Headless runner — loads a map, runs one search, reports the outcome.

    python -m pathgrid.app.runner --map pathgrid/maps/02_wall.json --steps-per-sec 8

Options:
    --map PATH           map file (else $PATHGRID_MAP, else the bundled 01_open.json)
    --heuristic NAME     manhattan | zero
    --steps-per-sec N    pace expansions; 0 runs flat out
    --max-steps N        cancel after N expansions
    --log-level LEVEL    DEBUG shows every step's metrics

Exit codes: 0 path found, 1 no path, 2 cancelled, 3 bad map.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from pathgrid.app.maps import MapError, load_map, resolve_map_path
from pathgrid.app.session import SearchSession
from pathgrid.core.heuristics import HEURISTICS
from pathgrid.core.types import CANCELLED, DONE, NO_PATH

log = logging.getLogger(__name__)

EXIT_CODES = {DONE: 0, NO_PATH: 1, CANCELLED: 2}
EXIT_BAD_MAP = 3
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pathgrid", description="Step-wise A* on a grid map.")
    p.add_argument("--map", dest="map_path", default=None)
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--steps-per-sec", type=float, default=0.0)
    p.add_argument("--max-steps", type=int, default=None)
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="INFO")
    return p


def _summary(res) -> str:
    m = res.metrics
    if res.status == DONE:
        cells = " ".join(f"({c.x},{c.y})" for c in res.path)
        return f"path found: {m['path_len']} steps, {m['popped']} expanded :: {cells}"
    if res.status == NO_PATH:
        return f"no path: {m['popped']} expanded"
    return f"cancelled after {m['popped']} expansions"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    path = resolve_map_path(args.map_path)
    try:
        grid = load_map(path)
    except MapError as ex:
        log.error("%s", ex)
        return EXIT_BAD_MAP

    heuristic = HEURISTICS[args.heuristic]
    session = SearchSession(grid, heuristic=heuristic, name="A*" if args.heuristic != "zero" else "Dijkstra")
    log.info("running %s on %s", session.name, grid)

    steps = 0

    def over_budget() -> bool:
        return args.max_steps is not None and steps >= args.max_steps

    interval = 1.0 / args.steps_per_sec if args.steps_per_sec > 0 else 0.0
    res = None
    for res in session.run_search(cancel=over_budget):
        if res.finished:
            continue
        steps += 1
        log.debug("step %d at %s: %s", steps, res.current, res.metrics)
        if interval:
            time.sleep(interval)

    print(_summary(res))
    return EXIT_CODES[res.status]


if __name__ == "__main__":
    sys.exit(main())
