"""Process-wide random source used for burst spawning.

``ParticleSystem`` accepts any object with ``uniform(a, b)``; by default it
uses the shared ``RNGService`` so a single ``--seed`` makes a session
reproducible.
"""

import random
from typing import Protocol

from explosion.logger import get_logger

log = get_logger("rng")


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.info(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def initialize(cls, seed: int | float | str | bytes | bytearray | None = None) -> None:
        cls._instance = cls(seed)

    @property
    def seed_value(self):
        return self._seed_val

    def seed(self, a: int | float | str | bytes | bytearray | None = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def uniform(self, a: float, b: float) -> float:
        """Return a random floating point number N such that a <= N <= b for a <= b."""
        return self._generator.uniform(a, b)


__all__ = ["RNGService", "RandomSource"]
