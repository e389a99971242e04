"""ASCII rendering helpers for diagnostics and the CLI."""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from .config import GeneratorConfig
from .pipeline import DEFAULT_CONFIG, generate
from .tiles import DOOR, FLOOR, FOLIAGE, HAZARD, TREASURE, WALL

GLYPHS: Dict[int, str] = {
    FLOOR: ".",
    WALL: "#",
    DOOR: "+",
    HAZARD: "a",
    TREASURE: "b",
    FOLIAGE: "c",
}


def to_rows(tiles: Sequence[int], size: int) -> List[List[int]]:
    if len(tiles) != size * size:
        raise ValueError(f"expected {size * size} tiles, got {len(tiles)}")
    return [list(tiles[r * size:(r + 1) * size]) for r in range(size)]


def render_line(line: Sequence[int]) -> str:
    return "".join(GLYPHS.get(v, "?") for v in line)


def render_grid(grid: Sequence[Sequence[int]]) -> str:
    return "\n".join(render_line(line) for line in grid)


def render_world(seed: str, config: Optional[GeneratorConfig] = None) -> str:
    """Stitch every chunk in ``[-W, W]^2`` into one mosaic.

    Chunks are separated by a blank column and a blank line; the top-left
    chunk is ``(-W, -W)``.
    """
    cfg = config or DEFAULT_CONFIG
    span = range(-cfg.world_extent, cfg.world_extent + 1)
    blocks = []
    for cy in span:
        rows = [to_rows(generate(seed, cx, cy, cfg), cfg.size) for cx in span]
        lines = []
        for r in range(cfg.size):
            lines.append(" ".join(render_line(chunk[r]) for chunk in rows))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


__all__ = ["GLYPHS", "to_rows", "render_line", "render_grid", "render_world"]
