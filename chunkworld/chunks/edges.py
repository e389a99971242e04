"""Chunk edge handling: doorway placement and world-boundary reinforcement.

Sides are named after compass directions. ``x`` moves along columns (west is
column 0) and ``y`` along rows (north is row 0).
"""
from __future__ import annotations
from typing import Dict, NamedTuple

from .carver import Grid
from .tiles import DOOR, FLOOR, WALL

SIDES = ("north", "south", "west", "east")


class SideState(NamedTuple):
    door: bool
    boundary: bool


def classify_sides(chunk_x: int, chunk_y: int, world_extent: int) -> Dict[str, SideState]:
    """Return which sides get a doorway and which sit on the world boundary.

    Coordinates outside ``[-world_extent, world_extent]`` are not an error:
    no side matches the boundary test, and doors follow the same
    inequalities as in-extent chunks.
    """
    w = world_extent
    return {
        "north": SideState(door=chunk_y > -w, boundary=chunk_y == -w),
        "south": SideState(door=chunk_y < w, boundary=chunk_y == w),
        "west": SideState(door=chunk_x > -w, boundary=chunk_x == -w),
        "east": SideState(door=chunk_x < w, boundary=chunk_x == w),
    }


def door_cells(size: int, side: str):
    """Return ``((door_row, door_col), (inner_row, inner_col))`` for ``side``."""
    mid = size // 2
    last = size - 1
    if side == "north":
        return (0, mid), (1, mid)
    if side == "south":
        return (last, mid), (last - 1, mid)
    if side == "west":
        return (mid, 0), (mid, 1)
    if side == "east":
        return (mid, last), (mid, last - 1)
    raise ValueError(f"unknown side: {side!r}")


def edge_cells(size: int, side: str):
    last = size - 1
    if side == "north":
        return [(0, i) for i in range(size)]
    if side == "south":
        return [(last, i) for i in range(size)]
    if side == "west":
        return [(i, 0) for i in range(size)]
    if side == "east":
        return [(i, last) for i in range(size)]
    raise ValueError(f"unknown side: {side!r}")


def place_doorways(grid: Grid, sides: Dict[str, SideState]) -> int:
    """Open a door at the midpoint of every side whose neighbor chunk exists.

    The cell one step inside is forced to Floor so the door reaches the
    carved interior. Returns the number of doors placed.
    """
    size = len(grid)
    placed = 0
    for side in SIDES:
        if not sides[side].door:
            continue
        (dr, dc), (ir, ic) = door_cells(size, side)
        grid[dr][dc] = DOOR
        grid[ir][ic] = FLOOR
        placed += 1
    return placed


def reinforce_boundaries(grid: Grid, sides: Dict[str, SideState]) -> int:
    """Wall the full edge on every side that sits on the world boundary.

    Runs after doorway placement and overrides any door on that side.
    Returns the number of edges reinforced.
    """
    size = len(grid)
    reinforced = 0
    for side in SIDES:
        if not sides[side].boundary:
            continue
        for row, col in edge_cells(size, side):
            grid[row][col] = WALL
        reinforced += 1
    return reinforced


__all__ = ["SIDES", "SideState", "classify_sides", "door_cells", "edge_cells", "place_doorways", "reinforce_boundaries"]
