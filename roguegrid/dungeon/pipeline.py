"""Pipeline orchestration for dungeon generation.

Runs the structural phases in order (walls, rooms, corridors, connectivity
repair) against a caller-supplied random source and reports what happened
through a metrics dict. Under-placement is never an error: the map is built
from whatever rooms and corridors fit.
"""
from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, List, NamedTuple, Optional

from ..logging_utils import log
from .config import DungeonConfig
from .connectivity import ensure_connectivity, find_isolated_areas, is_connected
from .corridors import carve_corridors
from .grid import Grid
from .metrics import init_metrics
from .rooms import Room, place_rooms
from .tiles import FLOOR, WALL


class GenerationResult(NamedTuple):
    grid: Grid
    rooms: List[Room]
    metrics: Dict[str, Any]


def generate(
    width: Optional[int] = None,
    height: Optional[int] = None,
    rng: Optional[random.Random] = None,
    config: Optional[DungeonConfig] = None,
) -> GenerationResult:
    """Generate a connected map.

    ``width``/``height`` override the config dimensions. Phase timings are
    recorded under ``metrics['phase_ms']`` when metrics are enabled.
    """
    if config is None:
        config = DungeonConfig()
    if width is not None or height is not None:
        config = replace(
            config,
            width=config.width if width is None else width,
            height=config.height if height is None else height,
        )
    if rng is None:
        rng = random.Random()

    metrics = init_metrics() if config.enable_metrics else {}
    phase_times: Dict[str, int] = {}
    start = time.perf_counter()

    def _phase(label, fn, *a, **k):
        ps = time.perf_counter()
        r = fn(*a, **k)
        phase_times[label] = int((time.perf_counter() - ps) * 1000)
        return r

    grid = Grid(config.width, config.height, fill=WALL)
    rooms, target, placed = _phase('rooms', place_rooms, grid, config, rng)
    if placed < target:
        log.info(event="rooms_under_placed", target=target, placed=placed)
    rows, cols, duplicates = _phase('corridors', carve_corridors, grid, config, rng)

    connectors = 0
    components = 0
    if not _phase('connectivity_check', is_connected, grid):
        components = len(find_isolated_areas(grid))
        log.info(event="map_disconnected", components=components)
        connectors = _phase('connectivity_repair', ensure_connectivity, grid, rng)
        log.info(event="connectivity_repaired", connectors=connectors)

    connected = is_connected(grid)
    floor_cells = grid.count(FLOOR)
    if config.enable_metrics:
        metrics.update(
            rooms_target=target,
            rooms_placed=placed,
            rooms_failed=target - placed,
            horizontal_corridors=len(rows),
            vertical_corridors=len(cols),
            duplicate_corridors=duplicates,
            floor_cells=floor_cells,
            components_before_repair=components,
            connectors_carved=connectors,
            connected=connected,
            runtime_ms=int((time.perf_counter() - start) * 1000),
            phase_ms=phase_times,
        )
    log.info(
        event="map_generated",
        width=grid.width,
        height=grid.height,
        rooms=placed,
        corridors=len(rows) + len(cols),
        floor=floor_cells,
        connected=connected,
    )
    return GenerationResult(grid, rooms, metrics)


__all__ = ["generate", "GenerationResult"]
