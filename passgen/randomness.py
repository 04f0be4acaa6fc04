"""
Random sources used by the generators.

Every draw goes through `RandomSource.randbelow`, so tests can pass a seeded
source and get repeatable output, and callers can swap in the quantum source
from `quantum_engine`.
"""

from __future__ import annotations

import random
import secrets
from abc import ABC, abstractmethod
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """
    Uniform sampling primitive: an index in [0, n) and a permutation.
    """

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniformly chosen integer in [0, n)."""

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """
        In-place Fisher–Yates shuffle driven by randbelow.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


class SystemRandomSource(RandomSource):
    """
    OS-backed randomness via the `secrets` module. Default for all generators.
    """

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return secrets.randbelow(n)


class SeededRandomSource(RandomSource):
    """
    Deterministic source for tests and reproducible runs. Not for real secrets.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return self._rng.randrange(n)


def default_source() -> RandomSource:
    return SystemRandomSource()
