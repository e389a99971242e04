"""Decoration pass: sprinkle walkable variants over the finished floor plan."""
from __future__ import annotations
from typing import List, Sequence

from .carver import Grid
from .rng import ChunkRandom
from .tiles import FLOOR


def flatten(grid: Grid) -> List[int]:
    return [value for line in grid for value in line]


def decorate(tiles: List[int], rng: ChunkRandom, chance: float, palette: Sequence[int]) -> int:
    """Replace Floor cells in ``tiles`` (row-major) with palette values in place.

    Each Floor cell draws once for the chance and, when it hits, once more
    for the palette index. Non-floor cells draw nothing. Returns the number
    of cells decorated.
    """
    decorated = 0
    for i, value in enumerate(tiles):
        if value != FLOOR:
            continue
        if rng.next() < chance:
            tiles[i] = palette[rng.below(len(palette))]
            decorated += 1
    return decorated


__all__ = ["flatten", "decorate"]
