"""Public chunk generation package interface."""

from .config import GeneratorConfig
from .pipeline import DEFAULT_CONFIG, ChunkGenerator, ChunkOutputs, generate
from .rng import ChunkRandom, chunk_seed
from .tiles import DOOR, FLOOR, FOLIAGE, HAZARD, TREASURE, WALKABLE, WALL  # noqa: F401

__all__ = [
    "ChunkGenerator",
    "ChunkOutputs",
    "ChunkRandom",
    "DEFAULT_CONFIG",
    "GeneratorConfig",
    "generate",
    "chunk_seed",
    "FLOOR",
    "WALL",
    "DOOR",
    "HAZARD",
    "TREASURE",
    "FOLIAGE",
    "WALKABLE",
]
