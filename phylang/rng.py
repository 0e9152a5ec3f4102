#!/usr/bin/env python3
"""
Deterministic Randomness
========================
Everything random in Phylang flows from one seeded stream per call, so that
any implementation following these definitions reproduces the same words
bit for bit.

- FNV-1a 64-bit hash over the UTF-8 bytes of a concept
- Seed mixing: ``((hash ^ seed) * 0x9E3779B97F4A7C15) mod 2**64``
- SplitMix64 stream; floats take the top 53 bits
- Weighted draws: cumulative weights, one draw, binary search
"""

from bisect import bisect_right
from itertools import accumulate
from typing import Any, Iterable, List, Sequence, Tuple

MASK64 = 0xFFFFFFFFFFFFFFFF

FNV_OFFSET_BASIS = 0xcbf29ce484222325
FNV_PRIME = 0x100000001b3

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB


def fnv1a64(data) -> int:
    """64-bit FNV-1a hash of a str (UTF-8 encoded) or bytes."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & MASK64
    return h


def mix_seed(concept_hash: int, seed: int) -> int:
    """Combine a concept hash with a language seed (order-sensitive)."""
    return ((concept_hash ^ (seed & MASK64)) * GOLDEN_GAMMA) & MASK64


def derive_seed(concept: str, seed: int) -> int:
    return mix_seed(fnv1a64(concept), seed)


class SeededRandom:
    """
    SplitMix64 pseudo-random stream.

    Mirrors the small method surface the generators need: random(),
    below(), randint(), choice() and weighted_choice(). Draws are consumed
    strictly in call order.
    """

    def __init__(self, seed: int):
        self._state = seed & MASK64

    @classmethod
    def for_concept(cls, concept: str, seed: int) -> 'SeededRandom':
        """Stream for one (concept, seed) pair."""
        return cls(derive_seed(concept, seed))

    def next_u64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * _MIX1) & MASK64
        z = ((z ^ (z >> 27)) * _MIX2) & MASK64
        return z ^ (z >> 31)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return (self.next_u64() >> 11) / float(1 << 53)

    def below(self, n: int) -> int:
        """Return random integer in [0, n)."""
        if n <= 0:
            raise ValueError("n must be positive")
        return min(int(self.random() * n), n - 1)

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return a + self.below(b - a + 1)

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def choice(self, seq: Sequence) -> Any:
        """Return a uniformly drawn element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self.below(len(seq))]

    def weighted_choice(self, items: Sequence[Tuple[Any, float]]) -> Any:
        """
        Choose from (item, weight) pairs.

        Builds the cumulative table on the fly; callers that draw repeatedly
        from the same weights should keep a WeightedTable instead.
        """
        return WeightedTable(items).draw(self)


class WeightedTable:
    """
    Cumulative-weight table for repeated categorical draws.

    A draw consumes exactly one value from the stream: ``random() * total``
    is located with bisect_right and clamped to the last index.
    """

    __slots__ = ('items', 'cumulative', 'total')

    def __init__(self, items: Iterable[Tuple[Any, float]]):
        pairs = [(item, float(weight)) for item, weight in items]
        if not pairs:
            raise IndexError("Cannot choose from empty sequence")
        if any(weight < 0 for _, weight in pairs):
            raise ValueError("weights must be non-negative")
        self.items: Tuple[Any, ...] = tuple(item for item, _ in pairs)
        self.cumulative: List[float] = list(accumulate(weight for _, weight in pairs))
        self.total = self.cumulative[-1]
        if self.total <= 0:
            raise ValueError("total weight must be positive")

    def draw(self, rng: SeededRandom) -> Any:
        target = rng.random() * self.total
        index = bisect_right(self.cumulative, target)
        return self.items[min(index, len(self.items) - 1)]

    def __len__(self):
        return len(self.items)


__all__ = [
    "MASK64",
    "FNV_OFFSET_BASIS",
    "FNV_PRIME",
    "fnv1a64",
    "mix_seed",
    "derive_seed",
    "SeededRandom",
    "WeightedTable",
]
