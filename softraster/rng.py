"""Shared uniform random number generator."""

from __future__ import annotations

import random
from typing import ClassVar


class RandomNumberGenerator:
    """Mersenne Twister generator with a process-wide shared instance."""

    _shared: ClassVar[RandomNumberGenerator | None] = None

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    @classmethod
    def instance(cls) -> RandomNumberGenerator:
        """Return the shared generator, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def random_float(self, low: float, high: float) -> float:
        """Uniform float in the half-open range [low, high)."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high})")
        value = low + (high - low) * self._rng.random()
        return low if value >= high else value