"""Pipeline orchestration for chunk generation.

Provides ``ChunkGenerator`` and the ``generate`` convenience function used by
the HTTP layer and the CLI. Each run owns its grid and random stream; nothing
is shared between runs.
"""
from __future__ import annotations
import time
from typing import Any, Dict, List, NamedTuple, Optional

from .carver import ORIGIN, Grid, carve, empty_grid
from .config import GeneratorConfig
from .connectivity import prune_unreachable, restore_connectivity
from .edges import SideState, classify_sides, place_doorways, reinforce_boundaries
from .features import decorate, flatten
from .metrics import init_metrics
from .rng import ChunkRandom, chunk_seed

DEFAULT_CONFIG = GeneratorConfig()


class ChunkOutputs(NamedTuple):
    tiles: List[int]
    structure: Grid
    carved: Grid
    sides: Dict[str, SideState]
    metrics: Dict[str, Any]


def _snapshot(grid: Grid) -> Grid:
    return [list(line) for line in grid]


class ChunkGenerator:
    def __init__(self, seed: str, chunk_x: int, chunk_y: int, config: Optional[GeneratorConfig] = None):
        self.seed = seed
        self.chunk_x = chunk_x
        self.chunk_y = chunk_y
        self.config = config or DEFAULT_CONFIG

    @property
    def chunk_seed(self) -> str:
        return chunk_seed(self.seed, self.chunk_x, self.chunk_y)

    def run(self) -> ChunkOutputs:
        """Execute the ordered generation phases.

        When metrics are enabled, ``phase_ms`` maps each phase to its duration
        in milliseconds. Timing never feeds back into the tiles.
        """
        cfg = self.config
        metrics: Dict[str, Any] = init_metrics() if cfg.enable_metrics else {}
        phase_times: Dict[str, float] = {}

        if cfg.enable_metrics:
            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        start = time.perf_counter()
        rng = ChunkRandom(self.chunk_seed)
        grid = empty_grid(cfg.size)
        carved_cells = _phase("carve", carve, grid, rng, ORIGIN)
        pruned = _phase("prune", prune_unreachable, grid, ORIGIN)
        carved = _snapshot(grid)

        sides = classify_sides(self.chunk_x, self.chunk_y, cfg.world_extent)
        doors = _phase("doorways", place_doorways, grid, sides)
        reinforced = _phase("boundaries", reinforce_boundaries, grid, sides)
        bridges, stranded = _phase("restore_connectivity", restore_connectivity, grid, ORIGIN)
        structure = _snapshot(grid)

        tiles = flatten(grid)
        decorations = _phase("decorate", decorate, tiles, rng, cfg.decoration_chance, cfg.decoration_palette)

        if cfg.enable_metrics:
            metrics.update(
                cells_carved=carved_cells,
                cells_pruned=pruned,
                doors_placed=doors,
                edges_reinforced=reinforced,
                bridges_opened=bridges,
                cells_stranded=stranded,
                decorations=decorations,
            )
            metrics["runtime_ms"] = round((time.perf_counter() - start) * 1000, 3)
            metrics["phase_ms"] = phase_times
        return ChunkOutputs(tiles, structure, carved, sides, metrics)


def generate(seed: str, chunk_x: int, chunk_y: int, config: Optional[GeneratorConfig] = None) -> List[int]:
    """Return the flat row-major tile list for chunk ``(chunk_x, chunk_y)`` of world ``seed``."""
    return ChunkGenerator(seed, chunk_x, chunk_y, config).run().tiles


__all__ = ["ChunkGenerator", "ChunkOutputs", "DEFAULT_CONFIG", "generate"]
