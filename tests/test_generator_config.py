import dataclasses

import pytest

from chunkworld.chunks import DEFAULT_CONFIG, GeneratorConfig
from chunkworld.chunks.tiles import DECORATIONS


def test_defaults():
    cfg = GeneratorConfig()
    assert cfg.size == 10
    assert cfg.world_extent == 4
    assert cfg.decoration_chance == 0.1
    assert cfg.decoration_palette == DECORATIONS
    assert cfg.enable_metrics is True
    assert cfg.midpoint == 5
    assert cfg == DEFAULT_CONFIG


def test_config_is_frozen_and_hashable():
    cfg = GeneratorConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.size = 12
    assert hash(cfg) == hash(GeneratorConfig())


def test_from_mapping_parses_flask_style_values():
    cfg = GeneratorConfig.from_mapping(
        {
            "CHUNK_SIZE": "12",
            "WORLD_EXTENT": 2,
            "CHUNK_DECORATION_CHANCE": "0.25",
            "CHUNK_DECORATION_PALETTE": "3, 5",
            "CHUNK_ENABLE_GENERATION_METRICS": "off",
        }
    )
    assert cfg == GeneratorConfig(
        size=12, world_extent=2, decoration_chance=0.25, decoration_palette=(3, 5), enable_metrics=False
    )


def test_from_mapping_accepts_sequences_and_missing_keys():
    cfg = GeneratorConfig.from_mapping({"CHUNK_DECORATION_PALETTE": [4], "CHUNK_ENABLE_GENERATION_METRICS": True})
    assert cfg.decoration_palette == (4,)
    assert cfg.enable_metrics is True
    assert cfg.size == 10
    assert GeneratorConfig.from_mapping({}) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 2},
        {"world_extent": -1},
        {"decoration_chance": 1.5},
        {"decoration_chance": -0.1},
        {"decoration_palette": ()},
        {"decoration_palette": (1,)},
        {"decoration_palette": (0, 3)},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)


def test_from_mapping_rejects_bad_palette():
    with pytest.raises(ValueError):
        GeneratorConfig.from_mapping({"CHUNK_DECORATION_PALETTE": "2,x"})
