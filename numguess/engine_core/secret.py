"""
Secret Generator - Draws the number the player has to guess.

The default source is the operating system's entropy pool, so secrets
are independent of each other and of anything in the request.
Tests inject a seeded random.Random (or any object with randint).
"""

from __future__ import annotations
from typing import Protocol
import random

SECRET_MIN = 1
SECRET_MAX = 100


class EntropySource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class SecretGenerator:
    """
    Produces secrets uniformly from [SECRET_MIN, SECRET_MAX].

    Stateless apart from the entropy source. Failures of the source
    propagate; there is no fallback value.
    """

    def __init__(self, rng: EntropySource | None = None):
        self._rng = rng if rng is not None else random.SystemRandom()

    def next(self) -> int:
        """Draw a fresh secret."""
        return self._rng.randint(SECRET_MIN, SECRET_MAX)
