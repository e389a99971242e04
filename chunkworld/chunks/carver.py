"""Randomized depth-first maze carver.

Carves a spanning tree of corridors through an all-wall grid, stepping two
cells at a time so single-cell walls remain between corridors except where a
passage is explicitly opened.
"""
from __future__ import annotations
from typing import Iterator, List, Tuple

from .rng import ChunkRandom
from .tiles import FLOOR, WALL

Grid = List[List[int]]
Coord = Tuple[int, int]

ORIGIN: Coord = (1, 1)
# (d_row, d_col): north, south, west, east
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
STEP = 2


def empty_grid(size: int, fill: int = WALL) -> Grid:
    return [[fill for _ in range(size)] for _ in range(size)]


def in_range(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def carve(grid: Grid, rng: ChunkRandom, origin: Coord = ORIGIN) -> int:
    """Carve the maze in place starting at ``origin``; returns cells opened.

    An explicit stack replaces recursion. Each frame keeps the iterator over
    its shuffled directions, so the stream is consumed in the same order as
    the recursive form: shuffle on entering a cell, resume the parent's
    remaining directions once a child is exhausted.
    """
    size = len(grid)
    opened = 0

    def enter(cell: Coord) -> Tuple[Coord, Iterator[Coord]]:
        nonlocal opened
        row, col = cell
        if grid[row][col] != FLOOR:
            grid[row][col] = FLOOR
            opened += 1
        return cell, iter(rng.shuffled(DIRECTIONS))

    stack = [enter(origin)]
    while stack:
        (row, col), pending = stack[-1]
        for d_row, d_col in pending:
            n_row, n_col = row + d_row * STEP, col + d_col * STEP
            if in_range(size, n_row, n_col) and grid[n_row][n_col] == WALL:
                grid[row + d_row][col + d_col] = FLOOR
                opened += 1
                stack.append(enter((n_row, n_col)))
                break
        else:
            stack.pop()
    return opened


__all__ = ["Grid", "Coord", "ORIGIN", "DIRECTIONS", "STEP", "empty_grid", "in_range", "carve"]
