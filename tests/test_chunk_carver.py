"""Carver structure tests.

With a 10x10 grid and a two-cell step the carver visits every (odd, odd)
cell, so the result is a spanning tree: 25 junction cells joined by 24
passages.
"""

from tests.chunk_test_utils import bfs_reachable, cells_with, wall_grid

from chunkworld.chunks.carver import carve, empty_grid, in_range
from chunkworld.chunks.connectivity import FLOOR_ONLY
from chunkworld.chunks.rng import ChunkRandom
from chunkworld.chunks.tiles import FLOOR, WALL


def carved(seed="carver-0-0", size=10):
    grid = empty_grid(size)
    opened = carve(grid, ChunkRandom(seed))
    return grid, opened


def test_empty_grid_is_all_wall():
    grid = empty_grid(4)
    assert grid == wall_grid(4)
    grid[0][0] = FLOOR
    assert grid[1][0] == WALL  # rows are independent lists


def test_in_range():
    assert in_range(10, 0, 0)
    assert in_range(10, 9, 9)
    assert not in_range(10, -1, 0)
    assert not in_range(10, 0, 10)


def test_origin_is_floor():
    grid, _ = carved()
    assert grid[1][1] == FLOOR


def test_every_junction_visited():
    for i in range(10):
        grid, opened = carved(f"junctions-{i}")
        for r in range(1, 10, 2):
            for c in range(1, 10, 2):
                assert grid[r][c] == FLOOR, (i, r, c)
        assert opened == 49
        assert len(cells_with(grid, {FLOOR})) == 49


def test_spanning_tree_has_no_loops():
    for i in range(10):
        grid, _ = carved(f"tree-{i}")
        floors = cells_with(grid, {FLOOR})
        links = 0
        for r, c in floors:
            if (r + 1, c) in floors:
                links += 1
            if (r, c + 1) in floors:
                links += 1
        assert links == len(floors) - 1


def test_pillars_and_leading_edges_stay_wall():
    grid, _ = carved("pillars")
    for r in range(0, 10, 2):
        for c in range(0, 10, 2):
            assert grid[r][c] == WALL
    assert all(v == WALL for v in grid[0])
    assert all(line[0] == WALL for line in grid)


def test_carved_floor_is_connected():
    grid, _ = carved("connected")
    assert bfs_reachable(grid, walkable=FLOOR_ONLY) == cells_with(grid, {FLOOR})


def test_carve_is_deterministic_and_seed_sensitive():
    a, _ = carved("same")
    b, _ = carved("same")
    assert a == b
    variants = {str(carved(f"variant-{i}")[0]) for i in range(10)}
    assert len(variants) > 1


def test_odd_size_grid():
    grid, opened = carved("odd", size=9)
    assert grid[1][1] == FLOOR
    # Junctions sit on 1,3,5,7; the last row/column (index 8) is never reached
    assert opened == 16 + 15
    assert all(v == WALL for v in grid[8])
