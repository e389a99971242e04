"""Connectivity utilities: flood fill, reachability pruning, bridge repair.

The carver alone produces a connected floor network, but reachability is a
post-condition of generation, so it is enforced here rather than assumed.
"""
from __future__ import annotations
from collections import deque
from typing import AbstractSet, Iterable, List, Optional, Set, Tuple

from .carver import ORIGIN, Coord, Grid, in_range
from .tiles import FLOOR, WALKABLE, WALL

NEIGHBORS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
FLOOR_ONLY = frozenset({FLOOR})


def flood_fill(grid: Grid, start: Coord = ORIGIN, passable: AbstractSet[int] = FLOOR_ONLY) -> Set[Coord]:
    """Return every cell 4-connected to ``start`` through ``passable`` tiles."""
    size = len(grid)
    sr, sc = start
    if not in_range(size, sr, sc) or grid[sr][sc] not in passable:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        row, col = q.popleft()
        for dr, dc in NEIGHBORS:
            nr, nc = row + dr, col + dc
            if in_range(size, nr, nc) and (nr, nc) not in visited and grid[nr][nc] in passable:
                visited.add((nr, nc))
                q.append((nr, nc))
    return visited


def cells_of(grid: Grid, kinds: AbstractSet[int]) -> Iterable[Coord]:
    for row, line in enumerate(grid):
        for col, value in enumerate(line):
            if value in kinds:
                yield row, col


def unreachable_cells(grid: Grid, origin: Coord = ORIGIN, passable: AbstractSet[int] = FLOOR_ONLY) -> List[Coord]:
    reached = flood_fill(grid, origin, passable)
    return [cell for cell in cells_of(grid, passable) if cell not in reached]


def prune_unreachable(grid: Grid, origin: Coord = ORIGIN) -> int:
    """Convert Floor cells not reachable from ``origin`` back to Wall.

    Returns the number of cells walled off.
    """
    pruned = 0
    for row, col in unreachable_cells(grid, origin, FLOOR_ONLY):
        grid[row][col] = WALL
        pruned += 1
    return pruned


def _find_bridge(grid: Grid, reached: Set[Coord], stranded: Set[Coord]) -> Optional[Coord]:
    # Outer ring excluded so reinforced edges stay intact
    size = len(grid)
    for row in range(1, size - 1):
        for col in range(1, size - 1):
            if grid[row][col] != WALL:
                continue
            for a, b in (((row - 1, col), (row + 1, col)), ((row, col - 1), (row, col + 1))):
                if (a in reached and b in stranded) or (b in reached and a in stranded):
                    return row, col
    return None


def restore_connectivity(grid: Grid, origin: Coord = ORIGIN) -> Tuple[int, int]:
    """Reattach walkable cells cut off from ``origin``.

    Opens interior wall cells that sit between the reachable region and a
    stranded cell until every walkable cell is reachable. Stranded Floor with
    no possible bridge is walled instead. Returns ``(bridges, walled)``.
    """
    bridges = 0
    walled = 0
    while True:
        reached = flood_fill(grid, origin, WALKABLE)
        stranded = {cell for cell in cells_of(grid, WALKABLE) if cell not in reached}
        if not stranded:
            break
        bridge = _find_bridge(grid, reached, stranded)
        if bridge is None:
            for row, col in sorted(stranded):
                if grid[row][col] == FLOOR:
                    grid[row][col] = WALL
                    walled += 1
            break
        grid[bridge[0]][bridge[1]] = FLOOR
        bridges += 1
    return bridges, walled


__all__ = [
    "NEIGHBORS",
    "FLOOR_ONLY",
    "flood_fill",
    "cells_of",
    "unreachable_cells",
    "prune_unreachable",
    "restore_connectivity",
]
