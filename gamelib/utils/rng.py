"""A seedable Mersenne-Twister random integer source."""

from __future__ import annotations

import random

RAND_MAX = 2147483647


class RNG:
    """Uniform integer generator; unseeded instances draw a seed from the OS."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._rng = random.Random(seed)

    def random(self, minimum: int = 0, maximum: int = RAND_MAX) -> int:
        """Return an integer uniformly drawn from ``[minimum, maximum]``."""
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        return self._rng.randint(minimum, maximum)