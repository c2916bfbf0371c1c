#!/usr/bin/env python3
"""
Random Sources for Language Generation
======================================
Every draw the generator makes goes through a RandomSource, so a language
and the names made from it can be replayed from a seed.

Sources:
- SeededRandom: reproducible, seeded from 16 bytes derived from a string
- TrueRandom: process-wide default backed by secrets.SystemRandom

Helpers:
- seed_bytes(): string seed -> 16 seed bytes
- biased_index(): index draw skewed toward the front of a sequence
"""

import random
import secrets
from typing import List, Sequence, Any

SEED_LENGTH = 16
SEED_PAD_BYTE = 0x01


# =============================================================================
# Random Sources
# =============================================================================

class RandomSource:
    """
    Thin wrapper around a ``random.Random`` compatible generator.

    The generator is advanced sequentially; callers that need reproducible
    output must not share one instance across threads.
    """

    def __init__(self, rng: random.Random):
        self._rng = rng

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def coin(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.random() < probability

    def randrange(self, start: int, stop: int) -> int:
        """Return random integer N such that start <= N < stop."""
        return self._rng.randrange(start, stop)

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return seq[self._rng.randrange(len(seq))]

    def shuffle(self, seq: List[Any]) -> None:
        """Shuffle list in place."""
        self._rng.shuffle(seq)


class SeededRandom(RandomSource):
    """
    Reproducible source seeded from raw seed bytes.

    The bytes are read as one big-endian integer, which seeds a Mersenne
    Twister. The mapping does not depend on hash randomization, so the
    same bytes give the same stream in every process.
    """

    def __init__(self, seed: bytes):
        self.seed = bytes(seed)
        super().__init__(random.Random(int.from_bytes(self.seed, 'big')))

    @classmethod
    def from_string(cls, seed: str) -> 'SeededRandom':
        """Seed from a string via seed_bytes()."""
        return cls(seed_bytes(seed))


class TrueRandom(RandomSource):
    """Cryptographically secure, non-reproducible source."""

    def __init__(self):
        super().__init__(secrets.SystemRandom())


# Global instance
_true_random = TrueRandom()


def get_rng() -> TrueRandom:
    """Get the global true random number generator."""
    return _true_random


# =============================================================================
# Helpers
# =============================================================================

def seed_bytes(seed: str) -> bytes:
    """
    Derive 16 seed bytes from a string.

    Takes the first 16 bytes of the UTF-8 encoding and right-pads shorter
    seeds with 0x01, so an empty seed never becomes all zeros.
    """
    raw = seed.encode('utf-8')[:SEED_LENGTH]
    return raw + bytes([SEED_PAD_BYTE]) * (SEED_LENGTH - len(raw))


def biased_index(rng: RandomSource, length: int) -> int:
    """
    Pick an index in [0, length) skewed toward 0.

    Squares a uniform draw before scaling, so index 0 is the most likely
    and the last index the least.
    """
    if length <= 0:
        raise IndexError("Cannot pick an index from an empty sequence")
    x = rng.random()
    return int(x * x * length)


def biased_choice(rng: RandomSource, seq: Sequence[Any]) -> Any:
    """Pick an element of seq using biased_index()."""
    return seq[biased_index(rng, len(seq))]


__all__ = [
    'RandomSource',
    'SeededRandom',
    'TrueRandom',
    'get_rng',
    'seed_bytes',
    'biased_index',
    'biased_choice',
]
