"""Seeded random number generator for reproducible mazes."""

import random
import time
from typing import Optional


class SeededRNG:
    """Seeded random number generator; falls back to a time seed when none is given."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed if seed is not None else time.time_ns())

    @property
    def seed(self) -> Optional[int]:
        """Get the caller-supplied seed (None when time-seeded)."""
        return self._seed

    def randrange(self, n: int) -> int:
        """Generate a random integer N such that 0 <= N < n."""
        return self._rng.randrange(n)
