"""prng.py — Seeded pseudo-random stream for the case simulation engine.

A Park–Miller "minimal standard" Lehmer generator: multiplication by 16807
modulo the Mersenne prime 2**31 - 1. It is tiny, has a full period over the
non-zero residues, and, unlike ``random.Random``, its output is pinned down
by three lines of arithmetic, so the same seed yields the same case on any
host and any Python version.

Called by: factory.py (one instance per generated case)
Depends on: Nothing
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807


class SeededRandom:
    """Infinite, lazily evaluated stream of floats in [0, 1).

    Not rewindable: to replay a stream, build a new instance with the
    same seed.

    Usage:
        rng = SeededRandom(42)
        rng.next_float()       # 0.000328707...
        rng.below(12)          # an int in 0..11
        rng.choice(("a", "b"))
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        state = seed % MODULUS
        # Zero is a fixed point of the recurrence.
        if state <= 0:
            state += MODULUS - 1
        self._state = state

    @property
    def state(self) -> int:
        """Current internal state (the last value produced by the recurrence)."""
        return self._state

    def next_float(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self._state = self._state * MULTIPLIER % MODULUS
        return (self._state - 1) / (MODULUS - 1)

    def below(self, n: int) -> int:
        """Return ``floor(next_float() * n)``, an int in ``0..n-1``."""
        if n <= 0:
            raise ValueError(f"below() needs a positive bound, got {n}")
        return int(self.next_float() * n)

    def choice(self, pool: Sequence[T]) -> T:
        """Pick one element of ``pool`` uniformly."""
        if not pool:
            raise ValueError("choice() needs a non-empty pool")
        return pool[self.below(len(pool))]

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.next_float()
