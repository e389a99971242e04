import pytest

from chunkworld.chunks import GeneratorConfig, generate
from chunkworld.chunks.render import GLYPHS, render_grid, render_line, render_world, to_rows


def test_glyphs_cover_every_tile():
    assert GLYPHS == {0: ".", 1: "#", 2: "+", 3: "a", 4: "b", 5: "c"}
    assert render_line([0, 1, 2, 3, 4, 5, 9]) == ".#+abc?"


def test_to_rows_checks_length():
    assert to_rows([0, 1, 1, 0], 2) == [[0, 1], [1, 0]]
    with pytest.raises(ValueError):
        to_rows([0, 1, 1], 2)


def test_render_grid_matches_tiles():
    tiles = generate("semilla", 0, 0)
    text = render_grid(to_rows(tiles, 10))
    lines = text.split("\n")
    assert len(lines) == 10
    assert all(len(line) == 10 for line in lines)
    assert lines[0][5] == "+"
    assert lines[0][0] == "#"


def test_render_world_layout():
    cfg = GeneratorConfig(world_extent=1)
    text = render_world("semilla", cfg)
    blocks = text.split("\n\n")
    assert len(blocks) == 3
    for block in blocks:
        lines = block.split("\n")
        assert len(lines) == 10
        # three chunks of ten glyphs separated by single spaces
        assert all(len(line) == 32 for line in lines)
    # top-left chunk is (-W, -W)
    first = [line[:10] for line in blocks[0].split("\n")]
    assert first == render_grid(to_rows(generate("semilla", -1, -1, cfg), 10)).split("\n")
