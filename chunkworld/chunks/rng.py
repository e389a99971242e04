"""Seeded random stream for chunk generation.

Every chunk owns one ``ChunkRandom`` seeded from ``"<seed>-<x>-<y>"``. The
stream is backed by ``random.Random`` with a string seed, which hashes the
string (sha512) rather than relying on ``hash()`` so results are stable across
processes and platforms. Changing anything here changes every chunk of every
existing world.
"""

from __future__ import annotations

import random
from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

SEED_SEPARATOR = "-"


def chunk_seed(seed: str, chunk_x: int, chunk_y: int) -> str:
    return f"{seed}{SEED_SEPARATOR}{chunk_x}{SEED_SEPARATOR}{chunk_y}"


class ChunkRandom:
    __slots__ = ("seed", "_rng")

    def __init__(self, seed: str):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        return self._rng.random()

    def below(self, n: int) -> int:
        """Return an int in [0, n) derived from a single ``next()`` draw."""
        return int(self.next() * n)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place using ``next()``; returns ``items``."""
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def shuffled(self, items: Sequence[T]) -> List[T]:
        return self.shuffle(list(items))


__all__ = ["ChunkRandom", "chunk_seed", "SEED_SEPARATOR"]
