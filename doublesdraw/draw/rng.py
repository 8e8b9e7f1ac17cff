"""
Seeded RNG for deterministic, replayable draws.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

# Upper bound for seeds drawn from system entropy
_MAX_SEED = 2**31 - 1


def fresh_seed() -> int:
    """Seed from system entropy, for callers that did not pass one."""
    return random.SystemRandom().randint(1, _MAX_SEED)


class SeededRNG:
    """Wrapper around random.Random for reproducible draws."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = fresh_seed()
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def random(self) -> float:
        return self._rng.random()

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def shuffle(self, items: list) -> None:
        self._rng.shuffle(items)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def getstate(self):
        return self._rng.getstate()

    def setstate(self, state) -> None:
        self._rng.setstate(state)
